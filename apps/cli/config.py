from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

# Every key the batch solver understands, with its default.
DEFAULTS: Dict[str, Any] = {
    "input": "-",
    "progress": False,
    "quiet": False,
    "show": False,
    "debug": False,
    "verify": False,
}

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def load_yaml(path: str | Path) -> DotDict:
    """Read a solver run file. Must be a mapping whose keys all appear in DEFAULTS."""
    text = Path(path).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"config {path} must be a mapping, got {type(data).__name__}")
    unknown = sorted(str(k) for k in data if k not in DEFAULTS)
    if unknown:
        raise ValueError(f"config {path} has unknown key(s): {', '.join(unknown)}")
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    # None means "not given on the command line"
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg

def resolve_config(path: str | Path | None = None, **overrides) -> DotDict:
    """DEFAULTS <- YAML file (if any) <- non-None CLI overrides."""
    cfg = DotDict(DEFAULTS)
    if path:
        merge_overrides(cfg, **load_yaml(path))
    return merge_overrides(cfg, **overrides)
