import os
import yaml
from dataclasses import dataclass, field, replace
from typing import Dict, Optional


def _read(path: str):
    with open(path, "r") as f:
        return yaml.safe_load(f)


@dataclass(frozen=True)
class Paths:
    output_dir_name: str = "output"

@dataclass(frozen=True)
class Logging:
    level: str = "INFO"

@dataclass(frozen=True)
class Muxing:
    tool: str = "mkvmerge"
    max_workers: Optional[int] = None
    max_command_length: int = 4096
    max_response_length: int = 32
    sync: bool = False
    sync_tool: str = "ffs"


@dataclass(frozen=True)
class Config:
    paths: Paths = Paths()
    logging: Logging = Logging()
    muxing: Muxing = Muxing()
    # extra ISO 639-2 code -> display name, merged over the built-in table
    languages: Dict[str, str] = field(default_factory=dict)

    @property
    def worker_count(self) -> int:
        return self.muxing.max_workers or os.cpu_count() or 1


def load_config(path: Optional[str]) -> Config:
    cfg = Config()
    if path and os.path.isfile(path):
        data = _read(path) or {}
        paths = replace(cfg.paths, **(data.get("paths", {}) or {}))
        logging = replace(cfg.logging, **(data.get("logging", {}) or {}))
        muxing = replace(cfg.muxing, **(data.get("muxing", {}) or {}))
        languages = {str(k): str(v) for k, v in (data.get("languages", {}) or {}).items()}
        cfg = replace(cfg, paths=paths, logging=logging, muxing=muxing, languages=languages)
    return cfg
