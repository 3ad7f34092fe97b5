"""Backend response model

All auth endpoints answer with the same envelope:
    success -> whether the operation succeeded
    message -> optional human readable explanation
    token -> session token (login only)
    user -> optional profile, currently only the display name
    redirectUrl -> where to go after login
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ApiUser:
    name: Optional[str] = None


@dataclass
class ApiResponse:
    success: bool
    message: Optional[str] = None
    token: Optional[str] = None
    user: Optional[ApiUser] = None
    redirect_url: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ApiResponse':
        """Build from a decoded JSON body, tolerating missing keys"""
        user_data = data.get("user")
        user = None
        if isinstance(user_data, dict):
            user = ApiUser(name=user_data.get("name"))

        return cls(
            success=bool(data.get("success", False)),
            message=data.get("message"),
            token=data.get("token"),
            user=user,
            redirect_url=data.get("redirectUrl"),
            raw=data
        )

    @property
    def display_name(self) -> Optional[str]:
        return self.user.name if self.user else None
