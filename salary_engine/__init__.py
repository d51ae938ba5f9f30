"""Salary estimation for nursing roles from historical job postings."""
from .errors import InsufficientDataError, MissingFieldsError, SalaryEstimationError
from .estimator import SalaryEstimator, build_query
from .locations import list_locations, parse_location
from .models import JobPosting, LocationFilter, SalaryEstimate, SalaryQuery

__all__ = [
    "SalaryEstimator", "build_query", "parse_location", "list_locations",
    "JobPosting", "LocationFilter", "SalaryQuery", "SalaryEstimate",
    "SalaryEstimationError", "MissingFieldsError", "InsufficientDataError",
]
