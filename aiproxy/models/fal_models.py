"""
Fal.ai schemas for the models with named conveniences on FalService.

Field docs follow https://fal.ai/models/fal-ai/fast-sdxl/api
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FalImageSize(str, Enum):
    """Named image size presets accepted by Fal image models"""

    SQUARE = "square"
    SQUARE_HD = "square_hd"
    PORTRAIT_4_3 = "portrait_4_3"
    PORTRAIT_16_9 = "portrait_16_9"
    LANDSCAPE_4_3 = "landscape_4_3"
    LANDSCAPE_16_9 = "landscape_16_9"

    @classmethod
    def from_dimensions(cls, size: str) -> "FalImageSize | FalCustomImageSize":
        """Convert a 'WIDTHxHEIGHT' string to a preset, or custom dimensions

        Unparseable or non-positive sizes fall back to 1024x1024.
        """
        size_mapping = {
            "512x512": cls.SQUARE,
            "1024x1024": cls.SQUARE_HD,
            "768x1024": cls.PORTRAIT_4_3,
            "576x1024": cls.PORTRAIT_16_9,
            "1024x768": cls.LANDSCAPE_4_3,
            "1024x576": cls.LANDSCAPE_16_9,
        }

        normalized = size.lower().strip()
        if normalized in size_mapping:
            return size_mapping[normalized]

        try:
            width, height = map(int, normalized.split("x"))
        except (ValueError, AttributeError):
            return cls.SQUARE_HD
        if width <= 0 or height <= 0:
            return cls.SQUARE_HD
        return FalCustomImageSize(width=width, height=height)


class FalCustomImageSize(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class FalFastSDXLInputSchema(BaseModel):
    """Input for fal-ai/fast-sdxl"""

    model_config = ConfigDict(use_enum_values=True)

    # The prompt to use for generating the image
    prompt: str
    # The negative prompt, describing what to leave out of the image
    negative_prompt: str | None = None
    # Preset name or explicit width/height. Provider default: square_hd
    image_size: FalImageSize | FalCustomImageSize | None = None
    # Number of denoising steps (1-50). Provider default: 25
    num_inference_steps: int | None = Field(default=None, ge=1, le=50)
    # How closely the model sticks to the prompt (0-20). Provider default: 7.5
    guidance_scale: float | None = Field(default=None, ge=0, le=20)
    # Number of images to generate (1-8). Provider default: 1
    num_images: int | None = Field(default=None, ge=1, le=8)
    # Same seed and prompt yield the same image
    seed: int | None = None
    enable_safety_checker: bool | None = None
    # Let the provider expand the prompt with extra detail
    expand_prompt: bool | None = None
    # "jpeg" or "png"
    format: str | None = None
    # Wait for the image to be generated and uploaded before returning the response
    sync_mode: bool | None = None


class FalOutputImage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str
    width: int | None = None
    height: int | None = None
    content_type: str | None = None


class FalFastSDXLOutputSchema(BaseModel):
    """Output of fal-ai/fast-sdxl"""

    model_config = ConfigDict(extra="ignore")

    images: list[FalOutputImage] = Field(default_factory=list)
    seed: int | None = None
    prompt: str | None = None
    has_nsfw_concepts: list[bool] | None = None
    timings: dict[str, float] | None = None
