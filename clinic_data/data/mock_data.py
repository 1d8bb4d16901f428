from __future__ import annotations

import random
import string
from typing import Optional, Union

from faker import Faker

from clinic_data.data.queries import Record

Seed = Optional[Union[int, str]]


SPECIALTIES = ["family", "pediatrics", "urgent_care", "cardiology", "dermatology"]


def _faker(seed: Seed) -> Faker:
    # One instance per call; reseeding a shared Faker repeats values across calls.
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def _clinic_code(rng: random.Random) -> str:
    return "".join(rng.choice(string.ascii_uppercase) for _ in range(3)) + f"{rng.randint(1, 99):02d}"


def _patient(fake: Faker, clinic_code: str) -> Record:
    return {
        "patient_id": fake.uuid4(),
        "clinic_code": clinic_code,
        "first_name": fake.first_name(),
        "last_name": fake.last_name(),
        "dob": fake.date_of_birth(minimum_age=0, maximum_age=95).isoformat(),
        "phone": fake.phone_number(),
    }


def clinic_mock(code: Optional[str] = None, seed: Seed = None) -> Record:
    rng = random.Random(seed)
    fake = _faker(seed)
    return {
        "clinic_code": code or _clinic_code(rng),
        "name": f"{fake.last_name()} {rng.choice(['Clinic', 'Health Center', 'Medical Group'])}",
        "specialty": rng.choice(SPECIALTIES),
        "address": fake.street_address(),
        "city": fake.city(),
        "phone": fake.phone_number(),
    }


def patient_mock(clinic_code: str, seed: Seed = None) -> Record:
    return _patient(_faker(seed), clinic_code)


def clinics_mock(n: int = 5, seed: Optional[int] = None) -> list[Record]:
    """n clinics with distinct codes. Unseeded runs draw fresh codes every time."""
    rng = random.Random(seed)
    codes: set[str] = set()
    while len(codes) < n:
        codes.add(_clinic_code(rng))
    return [
        clinic_mock(code, seed=None if seed is None else f"{code}:{seed}")
        for code in sorted(codes)
    ]


def patients_mock(clinic_code: str, n: int = 10, seed: Optional[int] = None) -> list[Record]:
    """n patients for one clinic. A given seed still yields different patients per clinic."""
    fake = _faker(None if seed is None else f"{clinic_code}:{seed}")
    return [_patient(fake, clinic_code) for _ in range(n)]
