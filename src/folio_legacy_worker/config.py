"""Pre-flight validation of the run configuration."""

import logging

from schemas.config import WorkerConfig

from .exceptions import OptionValidationError

logger = logging.getLogger(__name__)


def validate_config(config: WorkerConfig) -> WorkerConfig:
    """Check a WorkerConfig before any issue directory is touched.

    Args:
        config: Configuration assembled from the command line

    Returns:
        The same configuration, unchanged

    Raises:
        OptionValidationError: Naming the first offending option
    """
    if config.convention is None:
        raise OptionValidationError(
            "type must be defined (--ringier or --smd)", option="type"
        )
    if config.root_dir is None:
        raise OptionValidationError("--dir must be defined", option="dir")
    if not config.root_dir.is_dir():
        raise OptionValidationError(
            f"--dir must be a valid directory: {config.root_dir}", option="dir"
        )

    if config.package and not config.dry_run:
        for image in config.background_images:
            if not image.is_file():
                raise OptionValidationError(
                    f"--assets-dir must contain {image.name} ({config.assets_dir})",
                    option="assets-dir",
                )

    if config.thumbnails:
        for option, profile in (
            ("thumbnail-source-profile", config.thumbnail.source_profile),
            ("thumbnail-target-profile", config.thumbnail.target_profile),
        ):
            if profile is not None and not profile.is_file():
                raise OptionValidationError(
                    f"--{option} must be an existing ICC profile: {profile}",
                    option=option,
                )

    logger.debug(f"Configuration valid: {config.model_dump_json()}")
    return config
