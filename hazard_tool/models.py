"""Result types for wind speed lookups."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from hazard_tool.config import SOURCE_NAME


@dataclass
class Screenshot:
    """Diagnostic screenshot captured during a lookup (base64 PNG)."""
    name: str
    data: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'data': self.data}


def _format_timestamp(value: datetime) -> str:
    # 2024-05-01T14:03:22.117Z
    return value.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class WindSpeedResult:
    """Outcome of a single wind speed lookup."""
    address: str
    success: bool
    retrieved_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    wind_speed: Optional[int] = None
    raw_value: Optional[str] = None
    error: Optional[str] = None
    screenshots: List[Screenshot] = field(default_factory=list)

    @classmethod
    def succeeded(
        cls,
        address: str,
        raw_value: str,
        wind_speed: int,
        screenshots: Optional[List[Screenshot]] = None,
    ) -> 'WindSpeedResult':
        return cls(
            address=address,
            success=True,
            wind_speed=wind_speed,
            raw_value=raw_value,
            screenshots=list(screenshots or []),
        )

    @classmethod
    def failed(
        cls,
        address: str,
        error: str,
        screenshots: Optional[List[Screenshot]] = None,
    ) -> 'WindSpeedResult':
        return cls(
            address=address,
            success=False,
            error=error,
            screenshots=list(screenshots or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert result to the JSON response shape.

        Success responses carry windSpeed, vmph (same value) and rawValue;
        failure responses carry error instead.
        """
        data = {
            'address': self.address,
            'source': SOURCE_NAME,
            'retrievedAt': _format_timestamp(self.retrieved_at),
            'success': self.success,
        }

        if self.success:
            data['windSpeed'] = self.wind_speed
            data['vmph'] = self.wind_speed
            data['rawValue'] = self.raw_value
        else:
            data['error'] = self.error

        data['screenshots'] = [s.to_dict() for s in self.screenshots]
        return data
