#!/usr/bin/env python3
"""
Report whether the Supabase backend is usable, optionally seed it with synthetic rows.

Usage:
  python scripts/check_backend.py
  python scripts/check_backend.py --seed 3 --patients 5 --summary
  python scripts/check_backend.py --seed 3 --rng-seed 42
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from clinic_data.config import get_config
from clinic_data.data import mock_data
from clinic_data.data.store import ClinicStore, get_clinic_store
from clinic_data.data.summary import clinic_summary
from clinic_data.log import configure_logging


def seed(store: ClinicStore, n_clinics: int, n_patients: int, rng_seed: Optional[int] = None) -> tuple[int, int]:
    clinics_created = 0
    patients_created = 0
    for clinic in mock_data.clinics_mock(n_clinics, seed=rng_seed):
        if store.create_clinic(clinic) is None:
            continue
        clinics_created += 1
        for patient in mock_data.patients_mock(clinic["clinic_code"], n_patients, seed=rng_seed):
            if store.create_patient(patient) is not None:
                patients_created += 1
    return clinics_created, patients_created


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=0, help="insert N synthetic clinics")
    ap.add_argument("--patients", type=int, default=5, help="synthetic patients per seeded clinic")
    ap.add_argument("--rng-seed", type=int, default=None, help="make synthetic rows reproducible")
    ap.add_argument("--summary", action="store_true", help="print clinics with patient counts")
    args = ap.parse_args(argv)

    cfg = get_config()
    configure_logging(cfg.log_level)
    store = get_clinic_store(cfg)

    if not store.is_available():
        print(f"Backend unavailable: {store.backend.reason}")
        return 1
    print(f"Backend available: {cfg.supabase_url}")

    if args.seed:
        clinics, patients = seed(store, args.seed, args.patients, rng_seed=args.rng_seed)
        print(f"Seeded {clinics} clinics, {patients} patients")

    if args.summary:
        df = clinic_summary(store)
        print(df.to_string(index=False) if not df.empty else "No clinics")
    return 0


if __name__ == "__main__":
    sys.exit(main())
