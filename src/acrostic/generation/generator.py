"""
Text Generation From Initial Letters
====================================

Drives a next-character model to write one word per initial letter.
Each word starts with its letter and grows one sampled character at a
time until the model produces whitespace.
"""

import asyncio
import inspect
import logging
import re
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Union

import torch

from .sampling import sample

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")

OnCharCallback = Callable[[str], Union[Awaitable[None], None]]


def encode_window(window: Sequence[int], sample_len: int, char_set_size: int) -> torch.Tensor:
    """
    One-hot encode a character window.

    Args:
        window: Char-set indices, exactly sample_len of them.
        sample_len: Window length expected by the model.
        char_set_size: Size of the char set.

    Returns:
        Tensor of shape [1, sample_len, char_set_size].
    """
    if len(window) != sample_len:
        raise ValueError(f"Window length {len(window)} does not match the model sample_len {sample_len}.")
    indices = torch.as_tensor(list(window), dtype=torch.long)
    if indices.numel() and (indices.min() < 0 or indices.max() >= char_set_size):
        raise ValueError(f"Window indices must lie in [0, {char_set_size - 1}], got {list(window)}.")

    buffer = torch.zeros(1, sample_len, char_set_size)
    buffer[0, torch.arange(sample_len), indices] = 1.0
    return buffer


def _shift(window: List[int], index: int) -> List[int]:
    """Drop the oldest index and append the newest one."""
    return window[1:] + [index]


async def generate_text(
    model: Any,
    text_encoder: Any,
    seed_indices: Sequence[int],
    initial_letters: Sequence[str],
    temperature: float,
    on_char: Optional[OnCharCallback] = None,
    generator: Optional[torch.Generator] = None,
) -> str:
    """
    Generate one word per initial letter using a next-character model.

    Args:
        model: Next-character model with `input_shape` == (None, sample_len, char_set_size)
            and `predict(tensor) -> tensor[1, char_set_size]`.
        text_encoder: Encoder with `text_to_indices(text)` and `get_from_char_set(index)`.
        seed_indices: Initial window contents, sample_len indices. Not modified.
        initial_letters: First letter of every word to generate.
        temperature: Sampling temperature (see `sample`).
        on_char: Optional callback invoked with every generated character. Awaitable
            results are awaited before the next character is generated.
        generator: Optional random source for the sampling draws.

    Returns:
        The generated text, words separated by single spaces. The whitespace
        character that ended the last word is kept.
    """
    _, sample_len, char_set_size = model.input_shape

    # Avoid overwriting the caller's seed
    window = list(seed_indices)

    generated = ""
    num_generated = 0
    for i, letter in enumerate(initial_letters):
        if i > 0:
            generated += " "
        generated += letter
        window = _shift(window, text_encoder.text_to_indices(letter)[0])
        logger.debug(f"Starting word {i + 1}/{len(initial_letters)} with {letter!r}")

        while True:
            with torch.no_grad():
                inputs = encode_window(window, sample_len, char_set_size)
                output = model.predict(inputs)
                winner_index = sample(torch.squeeze(output), temperature, generator=generator)
                # Release transient tensors before yielding to the callback
                del inputs, output

            winner_char = text_encoder.get_from_char_set(winner_index)
            if on_char is not None:
                result = on_char(winner_char)
                if inspect.isawaitable(result):
                    await result

            generated += winner_char
            num_generated += 1
            window = _shift(window, winner_index)

            if _WHITESPACE.search(winner_char):
                break

    logger.info(f"Generated {len(initial_letters)} words ({num_generated} sampled characters).")
    return generated


def make_echo_callback(initial_letters: Sequence[str], write: Callable[[str], Any]) -> OnCharCallback:
    """
    Build an `on_char` callback that echoes the full generated text.

    Generated characters alone leave out the initial letters and the
    separating spaces, so the callback writes the first letter before the
    first character and `" " + next letter` after each word-ending
    whitespace character. The echoed text equals the return value of
    `generate_text`.
    """
    pending = list(initial_letters)
    started = False

    def on_char(char: str) -> None:
        nonlocal started
        if not started and pending:
            write(pending.pop(0))
        started = True
        write(char)
        if _WHITESPACE.search(char) and pending:
            write(" " + pending.pop(0))

    return on_char


def generate_text_sync(
    model: Any,
    text_encoder: Any,
    seed_indices: Sequence[int],
    initial_letters: Sequence[str],
    temperature: float,
    on_char: Optional[OnCharCallback] = None,
    generator: Optional[torch.Generator] = None,
) -> str:
    """Run `generate_text` to completion from synchronous code."""
    return asyncio.run(generate_text(
        model,
        text_encoder,
        seed_indices,
        initial_letters,
        temperature,
        on_char=on_char,
        generator=generator,
    ))
