from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_DEFAULT_PRIORITY_BITS = 31
_MAX_PRIORITY_BITS = 63


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _normalise_priority_bits(raw: str | None) -> int:
    bits = _parse_optional_int(raw)
    if bits is None:
        return _DEFAULT_PRIORITY_BITS
    if not 1 <= bits <= _MAX_PRIORITY_BITS:
        raise ValueError(
            f"Unsupported priority width {bits}. Expected 1..{_MAX_PRIORITY_BITS} bits."
        )
    return bits


def _normalise_log_level(raw: str | None) -> str:
    if raw is None or raw.strip() == "":
        return "INFO"
    return raw.strip().upper()


@dataclass(frozen=True)
class RuntimeConfig:
    seed: int | None
    priority_bits: int
    log_level: str

    @property
    def deterministic(self) -> bool:
        return self.seed is not None

    @property
    def max_priority(self) -> int:
        return (1 << self.priority_bits) - 1


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("ptreap")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    seed = _parse_optional_int(os.getenv("PTREAP_SEED"))
    priority_bits = _normalise_priority_bits(os.getenv("PTREAP_PRIORITY_BITS"))
    log_level = _normalise_log_level(os.getenv("PTREAP_LOG_LEVEL"))

    config = RuntimeConfig(
        seed=seed,
        priority_bits=priority_bits,
        log_level=log_level,
    )
    _configure_logging(config.log_level)
    return config


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
