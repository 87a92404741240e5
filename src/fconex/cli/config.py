from dataclasses import dataclass
from dynaconf import Dynaconf

from fconex.cli.constants import DEFAULTS
from fconex.config.settings import (
    RenderConfig,
    OutputConfig,
    FconexConfig,
)

settings = Dynaconf(
    envvar_prefix="FCONEX",
    load_dotenv=True,
    settings_files=[],
)


def _setting(key: str):
    return settings.get(key, DEFAULTS[key])


@dataclass(frozen=True)
class AppConfig:
    # ---------------- Fconex Policy ----------------
    fconex: FconexConfig = FconexConfig(
        render=RenderConfig(
            enabled=_setting("GRAPHVIZ_ENABLED"),
            dot_program=_setting("DOT_PROGRAM"),
            opener_program=_setting("OPENER_PROGRAM"),
            image_format=_setting("IMAGE_FORMAT"),
            write_dot_source=_setting("WRITE_DOT_SOURCE"),
            open_images=_setting("OPEN_IMAGES"),
        ),
        output=OutputConfig(
            output_file=_setting("OUTPUT_FILE"),
            graph_image=_setting("GRAPH_IMAGE"),
            components_dir=_setting("COMPONENTS_DIR"),
            component_image_template=_setting("COMPONENT_IMAGE_TEMPLATE"),
        ),
        log_level=_setting("LOG_LEVEL"),
    )
