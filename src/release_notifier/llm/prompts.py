from functools import lru_cache
from pathlib import Path

import yaml

PROMPTS_DIR = Path(__file__).parent / "prompts"

@lru_cache()
def load_prompt(name: str) -> str:
    """Return the `content` template of prompts/<name>.yaml."""
    path = PROMPTS_DIR / f"{name}.yaml"
    if not path.exists():
        raise FileNotFoundError(f"Prompt template {path.name} not found in {PROMPTS_DIR}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    content = data.get("content")
    if not content:
        raise ValueError(f"Prompt template {path.name} has no content")
    return content
