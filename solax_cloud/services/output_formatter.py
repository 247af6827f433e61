# solax_cloud/services/output_formatter.py

from __future__ import annotations

import json

from solax_cloud.models.inverter import Envelope
from solax_cloud.services.energy_flow import (
    decode_inverter_type,
    to_summary,
    yield_today,
    yield_total,
)


def _summary_payload(envelope: Envelope) -> dict:
    result = envelope.result
    payload = {
        "success": envelope.success,
        "message": envelope.exception,
        "inverter_sn": result.inverter_sn,
        "upload_time": result.upload_time,
    }
    if envelope.success:
        payload["inverter_type"] = decode_inverter_type(result.inverter_type)
        payload["summary"] = to_summary(result).as_dict()
        payload["yield_today_kwh"] = yield_today(result)
        payload["yield_total_kwh"] = yield_total(result)
    return payload


def emit_json(envelope: Envelope, *, raw: bool = False) -> None:
    payload = envelope.as_dict() if raw else _summary_payload(envelope)
    print(json.dumps(payload, indent=2))


def emit_human(envelope: Envelope, *, raw: bool = False) -> None:
    result = envelope.result
    name = result.inverter_sn or result.sn or "inverter"
    if not envelope.success:
        print(f"[{name}] ERROR: {envelope.exception}")
        return

    if raw:
        for key, value in envelope.result.as_dict().items():
            print(f"{key}={value}")
        return

    summary = to_summary(result)
    print(
        f"[{name}] {decode_inverter_type(result.inverter_type)} "
        f"status={summary.inverter_status} @ {result.upload_time or 'n/a'}"
    )
    print(
        f"PV={summary.pv_power:.0f}W  AC={summary.ac_power:.0f}W  "
        f"house={summary.to_house:.0f}W"
    )
    print(
        f"grid: export={summary.to_grid:.0f}W import={summary.from_grid:.0f}W  "
        f"battery: charge={summary.to_battery:.0f}W discharge={summary.from_battery:.0f}W "
        f"SoC={summary.battery_soc:.0f}%"
    )
    print(f"yield today={yield_today(result):.1f}kWh total={yield_total(result):.1f}kWh")
