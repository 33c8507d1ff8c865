from typing import List, Optional, Tuple, Union
import os
import json
from pathlib import Path
import logging

import torch

logger = logging.getLogger(__name__)

CHAR_SET_FILENAME = 'char_set.json'


class TextData:
    """
    Character-set encoder over a text corpus.

    Maps characters to their index in the char set and back, and draws
    random fixed-length slices of the corpus to seed generation.
    """

    def __init__(
        self,
        text: str,
        sample_len: int,
        char_set: Optional[List[str]] = None,
        data_identifier: str = "text",
    ):
        if sample_len <= 0:
            raise ValueError(f"sample_len must be positive, got {sample_len}")

        self._text = text
        self._sample_len = sample_len
        self._data_identifier = data_identifier

        if char_set is None:
            # Distinct characters in order of first appearance
            char_set = list(dict.fromkeys(text))
        if len(set(char_set)) != len(char_set):
            raise ValueError("char_set contains duplicate characters.")
        self._char_set: List[str] = list(char_set)
        self._char_to_idx = {char: idx for idx, char in enumerate(self._char_set)}

        logger.debug(
            f"TextData '{data_identifier}' initialized. Text length: {len(text)}, "
            f"char set size: {len(self._char_set)}, sample_len: {sample_len}"
        )

    @property
    def data_identifier(self) -> str:
        return self._data_identifier

    @property
    def text_len(self) -> int:
        return len(self._text)

    @property
    def sample_len(self) -> int:
        return self._sample_len

    @property
    def char_set_size(self) -> int:
        return len(self._char_set)

    @property
    def char_set(self) -> List[str]:
        return list(self._char_set)

    def text_to_indices(self, text: str) -> List[int]:
        """Convert text to char-set indices. Unknown characters raise ValueError."""
        indices = []
        for char in text:
            idx = self._char_to_idx.get(char)
            if idx is None:
                raise ValueError(f"Character {char!r} is not in the char set of '{self._data_identifier}'.")
            indices.append(idx)
        return indices

    def get_from_char_set(self, index: int) -> str:
        if not 0 <= index < len(self._char_set):
            raise IndexError(f"Char set index {index} out of range [0, {len(self._char_set) - 1}].")
        return self._char_set[index]

    def get_random_slice(self, generator: Optional[torch.Generator] = None) -> Tuple[str, List[int]]:
        """
        Draw a random slice of the text, sample_len characters long.

        Args:
            generator: Optional random source for reproducible slices.

        Returns:
            The slice text and its char-set indices.
        """
        span = self.text_len - self._sample_len
        if span < 0:
            raise ValueError(
                f"Text of '{self._data_identifier}' ({self.text_len} chars) is too short "
                f"for a random slice of {self._sample_len} characters."
            )
        start = int(torch.randint(0, span + 1, (1,), generator=generator).item())
        text_slice = self._text[start:start + self._sample_len]
        return text_slice, self.text_to_indices(text_slice)

    @classmethod
    def from_file(cls, path: Union[str, Path], sample_len: int, char_set: Optional[List[str]] = None) -> "TextData":
        path = Path(path)
        logger.info(f"Reading text corpus from {path}")
        text = path.read_text(encoding='utf-8')
        return cls(text, sample_len, char_set=char_set, data_identifier=path.stem)

    def save(self, output_dir: Union[str, Path]) -> None:
        """Save the char set and sample length. The text itself is not saved."""
        os.makedirs(output_dir, exist_ok=True)
        char_set_path = os.path.join(output_dir, CHAR_SET_FILENAME)
        logger.info(f"Saving char set to: {char_set_path}")
        with open(char_set_path, 'w', encoding='utf-8') as f:
            json.dump({
                'data_identifier': self._data_identifier,
                'sample_len': self._sample_len,
                'char_set': self._char_set,
            }, f, indent=2)

    @classmethod
    def load(cls, load_dir: Union[str, Path], text: str = "") -> "TextData":
        """Load a char set saved by save(). Pass text to enable random slices."""
        char_set_path = os.path.join(load_dir, CHAR_SET_FILENAME)
        if not os.path.exists(char_set_path):
            raise FileNotFoundError(f"Could not find {CHAR_SET_FILENAME} in {load_dir}")

        with open(char_set_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not all(k in data for k in ['sample_len', 'char_set']):
            raise ValueError(f"{char_set_path} is missing required keys.")

        text_data = cls(
            text,
            data['sample_len'],
            char_set=data['char_set'],
            data_identifier=data.get('data_identifier', 'text'),
        )
        logger.info(f"Loaded char set from {char_set_path}. Size: {text_data.char_set_size}")
        return text_data
