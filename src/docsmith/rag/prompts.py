import yaml

from docsmith.config import PROMPT_PATH


def load_prompts(path=PROMPT_PATH):
    """Loads prompts from a YAML file."""
    with open(path, "r") as f:
        return yaml.safe_load(f)
