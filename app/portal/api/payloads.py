"""Request payloads sent to the auth backend"""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class LoginPayload:
    registration_number: str
    password: str

    def to_json(self) -> Dict[str, Any]:
        return {
            "registrationNumber": self.registration_number,
            "password": self.password,
        }


@dataclass
class SignupPayload:
    name: str
    father_name: str
    course: str
    department: str
    registration_number: str
    passing_year: str
    password: str
    confirm_password: str
    current_position: str = ""
    current_company: str = ""

    REQUIRED_FIELDS = (
        "name",
        "father_name",
        "course",
        "department",
        "registration_number",
        "passing_year",
        "password",
        "confirm_password",
    )

    def missing_fields(self):
        return [name for name in self.REQUIRED_FIELDS if not getattr(self, name)]

    def to_json(self) -> Dict[str, Any]:
        """Wire format; confirm_password only exists for the local check"""
        return {
            "name": self.name,
            "fatherName": self.father_name,
            "course": self.course,
            "department": self.department,
            "registrationNumber": self.registration_number,
            "passingYear": self.passing_year,
            "password": self.password,
            "currentPosition": self.current_position,
            "currentCompany": self.current_company,
        }
