# solax_cloud/models/inverter.py
from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any, Dict, Optional


class InverterBrand(IntEnum):
    """Cloud platform the inverter reports to."""

    SOLAX = 0
    QCELLS = 1


# python attribute -> key used by the cloud API
_WIRE_KEYS = {
    "inverter_sn": "inverterSN",
    "sn": "sn",
    "acpower": "acpower",
    "yieldtoday": "yieldtoday",
    "yieldtotal": "yieldtotal",
    "feedinpower": "feedinpower",
    "feedinenergy": "feedinenergy",
    "consumeenergy": "consumeenergy",
    "feedinpower_m2": "feedinpowerM2",
    "soc": "soc",
    "peps1": "peps1",
    "peps2": "peps2",
    "peps3": "peps3",
    "inverter_type": "inverterType",
    "inverter_status": "inverterStatus",
    "upload_time": "uploadTime",
    "bat_power": "batPower",
    "powerdc1": "powerdc1",
    "powerdc2": "powerdc2",
    "powerdc3": "powerdc3",
    "powerdc4": "powerdc4",
}

_TEXT_FIELDS = {"inverter_sn", "sn", "inverter_type", "inverter_status", "upload_time"}


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # JSON integers are kept as int.
    if isinstance(value, int):
        return value
    return number


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass
class RawResult:
    inverter_sn: str | None = None      # inverter serial number
    sn: str | None = None               # communication module registration no
    acpower: float | None = None        # W
    yieldtoday: float | None = None     # kWh
    yieldtotal: float | None = None     # kWh
    feedinpower: float | None = None    # W, positive = export
    feedinenergy: float | None = None   # kWh
    consumeenergy: float | None = None  # kWh
    feedinpower_m2: float | None = None
    soc: float | None = None            # %
    peps1: float | None = None
    peps2: float | None = None
    peps3: float | None = None
    inverter_type: str | None = None
    inverter_status: str | None = None
    upload_time: str | None = None
    bat_power: float | None = None      # W, positive = charging
    powerdc1: float | None = None
    powerdc2: float | None = None
    powerdc3: float | None = None
    powerdc4: float | None = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RawResult":
        if not isinstance(data, dict):
            return cls()
        kwargs: Dict[str, Any] = {}
        for attr, key in _WIRE_KEYS.items():
            if key not in data:
                continue
            if attr in _TEXT_FIELDS:
                kwargs[attr] = _as_text(data[key])
            else:
                kwargs[attr] = _as_number(data[key])
        return cls(**kwargs)

    def as_dict(self) -> Dict[str, Any]:
        return {_WIRE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass
class Envelope:
    success: bool
    exception: str
    result: RawResult = field(default_factory=RawResult)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Envelope":
        message = data.get("exception")
        return cls(
            success=bool(data.get("success")),
            exception="" if message is None else str(message),
            result=RawResult.from_dict(data.get("result")),
        )

    @classmethod
    def failure(cls, message: str) -> "Envelope":
        return cls(success=False, exception=message or "Unknown error")

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "exception": self.exception,
            "result": self.result.as_dict(),
        }


@dataclass(frozen=True)
class Summary:
    pv_power: float
    ac_power: float
    to_house: float
    to_grid: float
    to_battery: float
    from_battery: float
    battery_soc: float
    from_grid: float
    inverter_status: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "pvPower": self.pv_power,
            "acPower": self.ac_power,
            "toHouse": self.to_house,
            "toGrid": self.to_grid,
            "toBattery": self.to_battery,
            "fromBattery": self.from_battery,
            "batterySoC": self.battery_soc,
            "fromGrid": self.from_grid,
            "inverterStatus": self.inverter_status,
        }
