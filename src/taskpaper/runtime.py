"""Runtime wiring helper for CLI applications."""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from .adapters.taskpaper_parser import TaskPaperParser
from .adapters.tree_codec import CODECS, JsonTreeCodec
from .config import TaskPaperConfig, load_config
from .core.ports import ParserStrategy, TreeCodec
from .document import ParseOptions, TaskPaper

log = logging.getLogger(__name__)


@dataclass
class Runtime:
    """Container for all wired components."""
    parser: ParserStrategy
    options: ParseOptions
    config: TaskPaperConfig

    def load(self, file: str) -> TaskPaper:
        """Parse a file, or stdin when `file` is "-"."""
        if file == "-":
            return TaskPaper(sys.stdin.read(), self.options, self.parser)

        path = Path(file)
        if not path.exists():
            raise FileNotFoundError(f"No such file: {path}")
        log.debug("Loading %s", path)
        return TaskPaper.from_file(path, self.options, self.parser)

    def codec(self, format_name: str | None = None) -> TreeCodec:
        name = format_name or self.config.output.format
        if name == "json":
            return JsonTreeCodec(indent=self.config.output.indent)
        return CODECS[name]()


def build_runtime(
    config_path: Path | None = None,
    document_path: Path | None = None,
    normalize: bool | None = None,
) -> Runtime:
    """Build and wire all components."""
    # Load configuration
    config = load_config(config_path=config_path, document_path=document_path)
    if config.path:
        log.debug("Using config %s", config.path)

    # CLI flag wins over config
    if normalize is None:
        normalize = config.parse.normalize

    return Runtime(
        parser=TaskPaperParser(),
        options=ParseOptions(normalize=normalize),
        config=config,
    )
