# solax_cloud/services/energy_flow.py

from __future__ import annotations

from typing import Any

from solax_cloud.models.inverter import RawResult, Summary


UNKNOWN = "Unknown"

INVERTER_TYPES = {
    "1": "X1-LX",
    "2": "X-Hybrid",
    "3": "X1-Hybiyd/Fit",
    "4": "X1-Boost/Air/Mini",
    "5": "X3-Hybiyd/Fit",
    "6": "X3-20K/30K",
    "7": "X3-MIC/PRO",
    "8": "X1-Smart",
    "9": "X1-AC",
    "10": "A1-Hybrid",
    "11": "A1-Fit",
    "12": "A1-Grid",
    "13": "J1-ESS",
}

INVERTER_STATUSES = {
    "100": "Wait Mode",
    "101": "Check Mode",
    "102": "Normal Mode",
    "103": "Fault Mode",
    "104": "Permanent Fault Mode",
    "105": "Update Mode",
    "106": "EPS Check Mode",
    "107": "EPS Mode",
    "108": "Self-Test Mode",
    "109": "Idle Mode",
    "110": "Standby Mode",
    "111": "Pv Wake Up Bat Mode",
    "112": "Gen Check Mode",
    "113": "Gen Run Mode",
}


def _value(raw: float | None) -> float:
    return raw if raw is not None else 0


def _lookup(table: dict[str, str], code: Any) -> str:
    if code is None:
        return UNKNOWN
    return table.get(str(code), UNKNOWN)


# ============================================================================
# Code tables
# ============================================================================

def decode_inverter_type(code: Any) -> str:
    """Model family for a Solax inverter type code."""
    return _lookup(INVERTER_TYPES, code)


def decode_inverter_status(code: Any) -> str:
    """Operating mode for a Solax inverter status code."""
    return _lookup(INVERTER_STATUSES, code)


# ============================================================================
# Power flows (W)
# ============================================================================

def pv_power(r: RawResult) -> float:
    """DC power summed over the four MPPT inputs."""
    return (
        _value(r.powerdc1)
        + _value(r.powerdc2)
        + _value(r.powerdc3)
        + _value(r.powerdc4)
    )


def ac_power(r: RawResult) -> float:
    # Passed through as reported, negative values included.
    return _value(r.acpower)


def power_to_battery(r: RawResult) -> float:
    bat = _value(r.bat_power)
    return bat if bat > 0 else 0


def power_from_battery(r: RawResult) -> float:
    bat = _value(r.bat_power)
    return -bat if bat < 0 else 0


def power_to_grid(r: RawResult) -> float:
    feedin = _value(r.feedinpower)
    return feedin if feedin > 0 else 0


def power_from_grid(r: RawResult) -> float:
    feedin = _value(r.feedinpower)
    return -feedin if feedin < 0 else 0


def power_to_house(r: RawResult) -> float:
    """Inverter output not exported to the grid."""
    return ac_power(r) - power_to_grid(r)


def battery_soc(r: RawResult) -> float:
    return _value(r.soc)


# ============================================================================
# Energy counters (kWh)
# ============================================================================

def yield_today(r: RawResult) -> float:
    return _value(r.yieldtoday)


def yield_total(r: RawResult) -> float:
    return _value(r.yieldtotal)


def to_summary(r: RawResult) -> Summary:
    return Summary(
        pv_power=pv_power(r),
        ac_power=ac_power(r),
        to_house=power_to_house(r),
        to_grid=power_to_grid(r),
        to_battery=power_to_battery(r),
        from_battery=power_from_battery(r),
        battery_soc=battery_soc(r),
        from_grid=power_from_grid(r),
        inverter_status=decode_inverter_status(r.inverter_status),
    )
