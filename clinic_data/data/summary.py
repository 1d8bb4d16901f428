from __future__ import annotations

import pandas as pd

from clinic_data.data.store import ClinicStore

SUMMARY_COLUMNS = ["clinic_code", "name", "patients"]


def clinic_summary(store: ClinicStore) -> pd.DataFrame:
    """One row per clinic with its patient count. Empty frame when the backend is down."""
    rows = []
    for code, clinic in store.get_all_clinics().items():
        rows.append(
            {
                "clinic_code": code,
                "name": clinic.get("name", ""),
                "patients": len(store.get_patients_by_clinic_code(code)),
            }
        )
    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS).sort_values("clinic_code").reset_index(drop=True)
