import os
from functools import lru_cache
from pathlib import Path


@lru_cache
def get_configfile() -> Path:
    # Priority: ENV > default file in current working directory
    raw = os.getenv("PARACODECCONFIG")

    if raw is None:
        file = Path.cwd() / "paracodec.yaml"
    else:
        file = Path(raw)

    if not file.is_file():
        raise SystemExit(
            f"[config] Configuration file not found: '{file}'.\n"
            "  - Set the PARACODECCONFIG environment variable\n"
            "  - Or place a 'paracodec.yaml' file in the current working directory."
        )

    return file
