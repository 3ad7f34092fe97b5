"""Field validation pipeline"""
from .validators import (is_valid_email, is_valid_passing_year,
                         is_valid_password, is_valid_registration_number)

__all__ = [
    'is_valid_email',
    'is_valid_passing_year',
    'is_valid_password',
    'is_valid_registration_number',
]
