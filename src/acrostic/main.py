import hydra
from omegaconf import DictConfig, OmegaConf, errors as omegaconf_errors
import logging
import sys
from pathlib import Path
from pydantic import ValidationError

from acrostic.config.schemas import AppConfig
from acrostic.generation.generator import generate_text_sync, make_echo_callback
from acrostic.generation.seeding import resolve_seed
from acrostic.utils.common import set_seed, setup_device, make_generator
from acrostic.utils.logging import setup_logging
from acrostic.utils.model_io import load_model_for_inference

log = logging.getLogger(__name__)


def run_generation(cfg: DictConfig) -> str:
    """
    Validate the composed config, load the model and generate text.

    Returns:
        The generated text.
    """
    resolved_cfg_dict = OmegaConf.to_container(cfg, resolve=True, throw_on_missing=True)
    validated_cfg = AppConfig(**resolved_cfg_dict)  # type: ignore[arg-type]
    log.debug("Validated AppConfig:\n%s", validated_cfg)

    gen_cfg = validated_cfg.generation
    letters = gen_cfg.letters
    if not letters:
        log.warning("No initial letters configured; nothing to generate.")
        return ""

    if validated_cfg.seed is not None:
        set_seed(validated_cfg.seed)
    generator = make_generator(validated_cfg.seed)
    device = setup_device(validated_cfg.device)

    text = None
    if validated_cfg.corpus_path:
        text = Path(validated_cfg.corpus_path).read_text(encoding='utf-8')
    model, text_data = load_model_for_inference(validated_cfg.model_dir, device=device, text=text)

    # Unknown initials must fail before anything is streamed
    text_data.text_to_indices("".join(letters))
    _, seed_indices = resolve_seed(text_data, gen_cfg.seed_text, generator=generator)

    on_char = None
    if gen_cfg.stream:
        def write(text: str) -> None:
            sys.stdout.write(text)
            sys.stdout.flush()

        on_char = make_echo_callback(letters, write)

    generated = generate_text_sync(
        model,
        text_data,
        seed_indices,
        letters,
        gen_cfg.temperature,
        on_char=on_char,
        generator=generator,
    )
    log.info(f"Generated text: {generated!r}")
    return generated


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig) -> None:
    """
    Generation entry point orchestrated by Hydra.
    """
    setup_logging(cfg.get("log_level", "INFO"))
    log.info(f"Raw Configuration:\n{OmegaConf.to_yaml(cfg)}")

    try:
        generated = run_generation(cfg)
    except omegaconf_errors.MissingMandatoryValue as e:
        log.error(f"Missing required configuration value: {e}")
        sys.exit(1)
    except ValidationError as e:
        log.error(f"Configuration validation failed:\n{e}")
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        log.error(f"Generation failed: {e}")
        sys.exit(1)

    if cfg.generation.get("stream", False):
        # Streamed text is already on stdout
        print()
    else:
        print(generated)


if __name__ == "__main__":
    main()
