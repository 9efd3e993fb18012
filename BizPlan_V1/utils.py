import json
from pathlib import Path
from typing import Type, TypeVar, Union

from pydantic import BaseModel, RootModel

ModelT = TypeVar("ModelT", bound=Union[BaseModel, RootModel])


def load_and_validate(data_path: Path, model: Type[ModelT]) -> ModelT:
    """
    Load JSON data from data_path and validate it against `model`.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Division tolérante : `default` si le dénominateur est nul."""
    if not denominator:
        return default
    return numerator / denominator
