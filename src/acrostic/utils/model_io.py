# src/acrostic/utils/model_io.py
import logging
import json
from pathlib import Path
from typing import Optional, Union, Tuple

import torch

from ..models.char_lstm import CharLSTM
from ..data.text_data import TextData, CHAR_SET_FILENAME
from ..config.schemas import CharLSTMConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
WEIGHTS_FILENAME = "pytorch_model.bin"


def save_model_for_inference(
    model: CharLSTM,
    text_data: TextData,
    path: Union[str, Path],
) -> None:
    """
    Save a model and its char set to a directory for inference.

    Args:
        model: The model instance.
        text_data: The encoder whose char set the model was trained on.
        path: Path to the output directory.
    """
    path = Path(path)
    logger.info(f"Saving model and char set to directory: {path}")
    path.mkdir(parents=True, exist_ok=True)

    config_path = path / CONFIG_FILENAME
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(model.get_config(), f, indent=4)
    logger.info(f"Model config saved to {config_path}")

    weights_path = path / WEIGHTS_FILENAME
    torch.save(model.state_dict(), weights_path)
    logger.info(f"Model weights saved to {weights_path}")

    text_data.save(path)


def load_model_for_inference(
    path: Union[str, Path],
    device: Optional[Union[torch.device, str]] = None,
    text: Optional[str] = None,
) -> Tuple[CharLSTM, TextData]:
    """
    Load a model and its char set for inference.

    Args:
        path: Directory containing config.json, pytorch_model.bin and char_set.json.
        device: Device to load the model onto. Auto-detects if None.
        text: Optional corpus text attached to the loaded TextData, needed for random seeds.

    Returns:
        A tuple containing the (CharLSTM, TextData).

    Raises:
        FileNotFoundError: If the directory or required files do not exist.
        ValueError: If the char set does not match the model config.
    """
    input_path = Path(path).resolve()
    if not input_path.is_dir():
        raise FileNotFoundError(f"Model directory not found: {input_path}")

    if device is None:
        device = torch.device('cuda' if torch.cuda.is_available() else 'cpu')
    elif isinstance(device, str):
        device = torch.device(device)

    for filename in (CONFIG_FILENAME, WEIGHTS_FILENAME, CHAR_SET_FILENAME):
        if not (input_path / filename).is_file():
            raise FileNotFoundError(f"Required file '{filename}' not found in {input_path}")

    logger.info(f"Loading model and char set from directory: {input_path}")
    with open(input_path / CONFIG_FILENAME, 'r', encoding='utf-8') as f:
        config_dict = json.load(f)
    model_config = CharLSTMConfig(**config_dict)

    text_data = TextData.load(input_path, text=text or "")
    if text_data.char_set_size != model_config.char_set_size:
        raise ValueError(
            f"Char set size {text_data.char_set_size} does not match model char_set_size {model_config.char_set_size}."
        )
    if text_data.sample_len != model_config.sample_len:
        raise ValueError(
            f"Char set sample_len {text_data.sample_len} does not match model sample_len {model_config.sample_len}."
        )

    model = CharLSTM(model_config)
    weights_path = input_path / WEIGHTS_FILENAME
    logger.info(f"Loading model weights from {weights_path}...")
    state_dict = torch.load(weights_path, map_location="cpu", weights_only=True)
    model.load_state_dict(state_dict)
    model.to(device)
    model.eval()
    logger.info(f"Model {type(model).__name__} loaded successfully from directory.")

    return model, text_data
