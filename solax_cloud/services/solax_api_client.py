from __future__ import annotations

import logging
from typing import Optional

import requests

from solax_cloud.config import SolaxAPIConfig
from solax_cloud.logging import API_LOGGER
from solax_cloud.models.inverter import Envelope, InverterBrand, Summary
from solax_cloud.services.energy_flow import to_summary


CLOUD_URLS = {
    InverterBrand.SOLAX: "https://www.solaxcloud.com/proxyApp/proxy/api/getRealtimeInfo.do",
    InverterBrand.QCELLS: "https://www.portal-q-cells.us/proxyApp/proxy/api/getRealtimeInfo.do",
}


class SolaxCloudAPIClient:
    """Solax Cloud real-time info client; failures come back as envelopes, never raised."""

    def __init__(
        self,
        brand: InverterBrand,
        token_id: str,
        sn: str,
        *,
        timeout: float | None = None,
        session: Optional[requests.Session] = None,
        log=None,
    ):
        self._brand = brand
        self._token_id = token_id
        self._sn = sn
        self.timeout = timeout
        self.session = session or requests.Session()
        self.log = log or logging.getLogger(API_LOGGER)

    @classmethod
    def from_config(
        cls,
        cfg: SolaxAPIConfig,
        log=None,
        session: Optional[requests.Session] = None,
    ) -> "SolaxCloudAPIClient":
        return cls(
            cfg.brand,
            cfg.token_id,
            cfg.sn,
            timeout=cfg.timeout,
            session=session,
            log=log,
        )

    # ------------------------------------------------------------------
    @property
    def brand(self) -> InverterBrand:
        return self._brand

    @property
    def token_id(self) -> str:
        return self._token_id

    @property
    def sn(self) -> str:
        return self._sn

    # ------------------------------------------------------------------
    def resolve_endpoint(self) -> str:
        if self._brand == InverterBrand.QCELLS:
            return CLOUD_URLS[InverterBrand.QCELLS]
        return CLOUD_URLS[InverterBrand.SOLAX]

    def build_url(self) -> str:
        return self.resolve_endpoint() + "?tokenId=" + self._token_id + "&sn=" + self._sn

    # ------------------------------------------------------------------
    def fetch_raw(self) -> Envelope:
        self.log.debug("Requesting Solax real-time data for sn=%s", self._sn)

        try:
            resp = self.session.get(self.build_url(), timeout=self.timeout)
        except Exception as exc:
            self.log.warning("Solax API request failed for sn=%s: %s", self._sn, exc)
            return Envelope.failure(f"request failed: {exc}")

        if not 200 <= resp.status_code < 300:
            reason = getattr(resp, "reason", None) or ""
            self.log.warning("Solax API returned HTTP %s for sn=%s", resp.status_code, self._sn)
            return Envelope.failure(f"unexpected response {resp.status_code} {reason}".strip())

        try:
            data = resp.json()
        except (ValueError, RecursionError) as exc:
            self.log.warning("Solax API returned non-JSON payload for sn=%s", self._sn)
            return Envelope.failure(f"invalid JSON payload: {exc}")

        if not isinstance(data, dict):
            self.log.warning("Solax API response for sn=%s was not a JSON object", self._sn)
            return Envelope.failure("unexpected payload: expected a JSON object")

        try:
            envelope = Envelope.from_dict(data)
        except Exception as exc:
            self.log.warning("Solax API payload for sn=%s could not be parsed: %s", self._sn, exc)
            return Envelope.failure(f"unexpected payload: {exc}")

        if not envelope.success:
            self.log.warning("Solax API reported failure for sn=%s: %s", self._sn, envelope.exception)
        return envelope

    def fetch_summary(self) -> Summary | None:
        envelope = self.fetch_raw()
        if not envelope.success:
            return None
        return to_summary(envelope.result)
