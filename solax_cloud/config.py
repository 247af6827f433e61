# solax_cloud/config.py
from dataclasses import dataclass, field
from pathlib import Path
import configparser

from solax_cloud.models.inverter import InverterBrand


def parse_brand(raw: str) -> InverterBrand:
    name = raw.strip().upper().replace("-", "")
    if name.isdigit():
        try:
            return InverterBrand(int(name))
        except ValueError:
            pass
    elif name in InverterBrand.__members__:
        return InverterBrand[name]
    raise ValueError(f"Unknown inverter brand '{raw}' (expected solax or qcells)")


@dataclass
class SolaxAPIConfig:
    token_id: str
    sn: str
    brand: InverterBrand = InverterBrand.SOLAX
    timeout: float | None = 20.0


@dataclass
class LoggingConfig:
    console_level: str = "INFO"
    console_quiet: bool = False
    debug_modules: list[str] = field(default_factory=list)


@dataclass
class AppConfig:
    solax: SolaxAPIConfig
    logging: LoggingConfig


class Config:
    def __init__(self, path: str):
        self.path = Path(path)
        self.parser = configparser.ConfigParser(inline_comment_prefixes=("#",))
        read = self.parser.read(self.path)
        if not read:
            raise FileNotFoundError(f"Config file not found: {self.path}")

    @classmethod
    def load(cls, path: str) -> AppConfig:
        cfg = cls(path)

        p = cfg.parser

        def _as_bool(value: str) -> bool:
            return value.strip().lower() == "true"

        # --- Solax cloud ---
        if "solax" not in p:
            raise ValueError("[solax] section missing from config")

        solax_sec = p["solax"]
        token_id = (solax_sec.get("token_id") or solax_sec.get("tokenid") or "").strip()
        if not token_id:
            raise ValueError("[solax] token_id is required")
        sn = (solax_sec.get("sn") or solax_sec.get("serial") or "").strip()
        if not sn:
            raise ValueError("[solax] sn is required")

        solax_kwargs = {"token_id": token_id, "sn": sn}
        if "brand" in solax_sec:
            solax_kwargs["brand"] = parse_brand(solax_sec["brand"])
        if "timeout" in solax_sec:
            raw_timeout = solax_sec["timeout"].strip()
            solax_kwargs["timeout"] = float(raw_timeout) if raw_timeout else None
        solax_cfg = SolaxAPIConfig(**solax_kwargs)

        # --- Logging ---
        logging_kwargs = {}
        if "logging" in p:
            logging_sec = p["logging"]
            if "console_level" in logging_sec:
                logging_kwargs["console_level"] = logging_sec["console_level"]
            if "console_quiet" in logging_sec:
                logging_kwargs["console_quiet"] = _as_bool(logging_sec["console_quiet"])
            if "debug_modules" in logging_sec:
                raw = logging_sec["debug_modules"]
                logging_kwargs["debug_modules"] = [x.strip() for x in raw.split(",") if x.strip()]
        logging_cfg = LoggingConfig(**logging_kwargs)

        return AppConfig(
            solax=solax_cfg,
            logging=logging_cfg,
        )
