"""Demo run configuration schema."""
from pydantic import BaseModel, ConfigDict, Field


class DemoConfig(BaseModel):
    """Behaviour of a demo run around the pattern output itself."""
    model_config = ConfigDict(extra="forbid")

    wait_for_input: bool = Field(
        True, description="Wait for one line of input before exiting"
    )
    prompt: str = Field("", description="Prompt shown while waiting for input")
