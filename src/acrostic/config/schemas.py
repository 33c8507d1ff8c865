from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Optional, List, Literal
import logging

# Shared settings for the application-level schemas
_model_config_shared = ConfigDict(
    validate_assignment=True,
    extra='ignore', # Ignore extra fields like Hydra internals
    protected_namespaces=(), # Allow field names such as model_dir
)

logger = logging.getLogger(__name__)

MIN_TEMPERATURE = 1e-6

# --- Model Configuration Schemas --- #

class NextCharModelConfig(BaseModel):
    """
    Base Pydantic configuration class for next-character models.
    Input shape is [batch, sample_len, char_set_size].
    """
    model_config = ConfigDict(extra='allow')
    architecture: str = Field(..., description="Name of the model architecture (e.g., char_lstm).")
    sample_len: int = Field(..., gt=0, description="Length of the character window fed to the model.")
    char_set_size: int = Field(..., gt=0, description="Size of the character vocabulary.")

class CharLSTMConfig(NextCharModelConfig):
    """Config for stacked-LSTM next-character models"""
    architecture: Literal["char_lstm"] = Field("char_lstm", description="Architecture set to char_lstm.")
    lstm_layer_sizes: List[int] = Field(default_factory=lambda: [128], description="Hidden size of each stacked LSTM layer.")

    @field_validator('lstm_layer_sizes')
    @classmethod
    def check_layer_sizes(cls, v: List[int]) -> List[int]:
        if not v:
            raise ValueError("lstm_layer_sizes must contain at least one layer size.")
        if any(size <= 0 for size in v):
            raise ValueError(f"LSTM layer sizes must be positive, got {v}")
        return v


# --- Generation Configuration --- #
class GenerationConfig(BaseModel):
    model_config = _model_config_shared.copy()
    initial_letters: str = Field("", description="First letter of every word to generate. Whitespace is ignored.")
    seed_text: Optional[str] = Field(None, description="Seed text for the character window. A random corpus slice is used if None.")
    temperature: float = Field(0.75, description="Sampling temperature. Values <= 0 are clamped to a small positive floor.")
    stream: bool = Field(False, description="Echo each character as soon as it is generated.")

    @model_validator(mode='after')
    def check_temperature_range(self) -> 'GenerationConfig':
        if not 0.0 < self.temperature <= 1.0:
            logger.warning(
                f"Temperature {self.temperature} is outside the intended range (0, 1]. "
                f"Values <= 0 are clamped to {MIN_TEMPERATURE}."
            )
        return self

    @property
    def letters(self) -> List[str]:
        """Initial letters with whitespace removed."""
        return [ch for ch in self.initial_letters if not ch.isspace()]


# --- Main Application Schema --- #

class AppConfig(BaseModel):
    """Main application configuration schema."""
    model_config = _model_config_shared.copy()
    model_dir: str = Field(..., description="Directory holding config.json, pytorch_model.bin and char_set.json.")
    corpus_path: Optional[str] = Field(None, description="Text file used to draw random seed windows.")
    generation: GenerationConfig = Field(default_factory=GenerationConfig) # type: ignore [arg-type]

    project_name: str = "acrostic"
    seed: Optional[int] = None
    device: Literal['auto', 'cpu', 'cuda'] = 'auto'
    log_level: str = "INFO"
