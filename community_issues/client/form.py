"""
State of the "new issue" form.

The form collects the create payload, optionally fills the location from a
coordinate pair, and tracks the submitting/error/success flags shown next to
the submit button.
"""

from dataclasses import dataclass, field

import httpx

from ..constants import DEFAULT_CATEGORY, DEFAULT_ERROR_MESSAGES
from ..validation import missing_required_fields
from .api import IssueApiError


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def as_location(self) -> str:
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


@dataclass
class IssueFormState:
    title: str = ""
    description: str = ""
    category: str = DEFAULT_CATEGORY
    location: str = ""
    contact: str = ""
    coordinates: Coordinates | None = None

    submitting: bool = field(default=False, compare=False)
    error: str | None = field(default=None, compare=False)
    success: bool = field(default=False, compare=False)

    def use_coordinates(self, latitude: float, longitude: float) -> None:
        """Fill the location field from a device position."""
        self.coordinates = Coordinates(latitude, longitude)
        self.location = self.coordinates.as_location()

    def missing_fields(self) -> list[str]:
        return missing_required_fields(self.to_payload())

    def to_payload(self) -> dict[str, str]:
        """Create payload; an empty contact is left out."""
        payload = {
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "location": self.location,
        }
        if self.contact:
            payload["contact"] = self.contact
        return payload

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.category = DEFAULT_CATEGORY
        self.location = ""
        self.contact = ""
        self.coordinates = None

    def submit(self, session) -> bool:
        """
        Send the form through an IssueSession.

        On success the fields are cleared and `success` is set; on failure the
        fields are kept and `error` holds the message.
        """
        self.error = None
        self.success = False
        self.submitting = True
        try:
            session.add_issue(self.to_payload())
        except IssueApiError as e:
            self.error = e.message
            return False
        except httpx.HTTPError:
            self.error = DEFAULT_ERROR_MESSAGES["create_issue"]
            return False
        finally:
            self.submitting = False

        self.reset()
        self.success = True
        return True


__all__ = ["Coordinates", "IssueFormState"]
