"""Clinic and patient records over Supabase, degrading to empty results when the backend is down."""

from clinic_data.config import AppConfig, get_config
from clinic_data.data import ClinicStore, DataResult, get_clinic_store

__all__ = ["AppConfig", "ClinicStore", "DataResult", "get_clinic_store", "get_config"]
