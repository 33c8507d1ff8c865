# src/acrostic/cli/generate_commands.py
import typer
import logging
import time
from typing import Optional
from pathlib import Path

from ..utils.common import set_seed, setup_device, make_generator
from ..utils.model_io import load_model_for_inference
from ..generation.generator import generate_text_sync, make_echo_callback
from ..generation.seeding import resolve_seed
from ..config.schemas import GenerationConfig

generate_app = typer.Typer(help="Commands for text generation")
logger = logging.getLogger(__name__)
console = typer.echo


@generate_app.command("text")
def generate_text(
    model_dir: Path = typer.Option(..., "--model-dir", "-m", help="Directory containing config.json, pytorch_model.bin and char_set.json.", exists=True, file_okay=False, resolve_path=True),
    initials: str = typer.Option(..., "--initials", "-i", help="First letter of every word to generate (whitespace is ignored)."),
    seed_text: Optional[str] = typer.Option(None, "--seed-text", help="Seed text, at least sample_len characters long."),
    corpus: Optional[Path] = typer.Option(None, "--corpus", help="Text file to draw a random seed slice from when no seed text is given.", exists=True, dir_okay=False, resolve_path=True),
    temperature: float = typer.Option(0.75, "--temperature", "-t", help="Sampling temperature."),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for reproducibility."),
    device: Optional[str] = typer.Option(None, "--device", "-d", help="Device override (e.g., 'cpu', 'cuda'). Auto-detect if None."),
    stream: bool = typer.Option(True, "--stream/--no-stream", help="Print characters as they are generated."),
) -> None:
    """Generate one word per initial letter using a trained model directory."""

    # --- 1. Setup ---
    gen_config = GenerationConfig(initial_letters=initials, seed_text=seed_text, temperature=temperature, stream=stream)
    letters = gen_config.letters
    if not letters:
        logger.error("No initial letters given.")
        raise typer.Exit(code=1)

    if seed_text is None and corpus is None:
        logger.error("Provide either --seed-text or --corpus to seed generation.")
        raise typer.Exit(code=1)

    if seed is not None:
        set_seed(seed)
    generator = make_generator(seed)
    resolved_device = setup_device(device or "auto")

    # --- 2. Load Model and Char Set ---
    try:
        text = corpus.read_text(encoding='utf-8') if corpus is not None else None
        model, text_data = load_model_for_inference(model_dir, device=resolved_device, text=text)
    except FileNotFoundError as e:
        logger.error(f"Model files not found: {e}")
        raise typer.Exit(code=1)
    except ValueError as ve:
        logger.error(f"Configuration or loading error: {ve}")
        raise typer.Exit(code=1)

    # --- 3. Initial Letters and Seed Window ---
    try:
        text_data.text_to_indices("".join(letters))
        seed_sentence, seed_indices = resolve_seed(text_data, seed_text, generator=generator)
    except ValueError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)

    # --- 4. Generate ---
    on_char = None
    if gen_config.stream:
        on_char = make_echo_callback(letters, lambda text: console(text, nl=False))

    start_time = time.time()
    try:
        generated = generate_text_sync(
            model,
            text_data,
            seed_indices,
            letters,
            gen_config.temperature,
            on_char=on_char,
            generator=generator,
        )
    except Exception:
        logger.exception("Error during text generation.")
        raise typer.Exit(code=1)
    elapsed = time.time() - start_time

    if gen_config.stream:
        console("")
    else:
        console(generated)
    logger.info(f"Generated {len(generated)} characters in {elapsed:.2f}s from seed {seed_sentence!r}")
