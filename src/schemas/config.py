"""Run configuration schemas.

A WorkerConfig is built once by the CLI and handed to every component at
construction. All models are frozen.
"""

from pathlib import Path

from pydantic import BaseModel

from .asset import NamingConvention

BACKGROUND_IMAGES = (
    "folioIssueBackgroundPhoneLandscape.png",
    "folioIssueBackgroundPhonePortrait.png",
    "folioIssueBackgroundTabletLandscape.png",
    "folioIssueBackgroundTabletPortrait.png",
)


class ThumbnailSettings(BaseModel):
    """Fixed parameters for PDF page thumbnails.

    Attributes:
        size: Bounding box edge; thumbnails are resized to fit size x size
        quality: JPEG quality
        sharpen_radius: Sharpen radius (0 lets the radius follow sigma)
        sharpen_sigma: Sharpen sigma
        strip_metadata: Drop EXIF/ICC/comment data from the output
        source_profile: ICC profile for the rendered CMYK source (optional)
        target_profile: ICC profile for the RGB output (optional, sRGB if unset)
    """

    size: int = 256
    quality: int = 100
    sharpen_radius: float = 0.0
    sharpen_sigma: float = 0.8
    strip_metadata: bool = True
    source_profile: Path | None = None
    target_profile: Path | None = None

    model_config = {"frozen": True}


class ManifestSettings(BaseModel):
    """Layout constants written into every manifest.xml."""

    page_width: int = 2032
    page_height: int = 2729
    toc_mode: int = 1
    centre_covers_in_landscape: bool = True
    portrait_page_alignment_mode: int = 1
    cover_page_number: int = 0
    link_colour: str = "#0000FF"
    link_border_colour: str = "#0000FF"
    link_border_width: int = 1
    link_padding: int = 2
    enable_spread_mode: int = 1

    model_config = {"frozen": True}


class WorkerConfig(BaseModel):
    """Immutable options for one worker run.

    Attributes:
        root_dir: Directory containing the issue directories
        convention: Naming convention of the legacy files
        thumbnails: Generate a JPG thumbnail for every renamed PDF
        package: Write <issue>.zip next to every issue directory
        assets_dir: Directory holding the four background images
        dry_run: Plan renames without touching the filesystem
        fail_fast: Stop the run after the first failed issue
        thumbnail: Thumbnail parameters
        manifest: Manifest constants
    """

    root_dir: Path | None = None
    convention: NamingConvention | None = None
    thumbnails: bool = False
    package: bool = False
    assets_dir: Path = Path("./assets")
    dry_run: bool = False
    fail_fast: bool = False
    thumbnail: ThumbnailSettings = ThumbnailSettings()
    manifest: ManifestSettings = ManifestSettings()

    model_config = {"frozen": True}

    @property
    def require_jpgs(self) -> bool:
        """JPGs are generated from the PDFs when thumbnailing, so only then optional."""
        return not self.thumbnails

    @property
    def background_images(self) -> list[Path]:
        return [self.assets_dir / name for name in BACKGROUND_IMAGES]
