"""Input access and logging used by the payload builder and executor."""
import logging
import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional

logger = logging.getLogger(__name__)


class RunContext(ABC):
    """Abstract source of step inputs plus the log sink for one run."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger

    @abstractmethod
    def read_raw(self, name: str) -> Optional[str]:
        """
        Return the raw value of an input, or None when it was not supplied.

        Args:
            name: Hyphenated input key (e.g. "webhook-url")
        """
        pass

    def get_input(self, name: str) -> str:
        """Return the trimmed input value; "" means absent."""
        value = self.read_raw(name)
        if value is None:
            return ""
        return str(value).strip()

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)


class MappingRunContext(RunContext):
    """RunContext over an in-memory mapping of inputs."""

    def __init__(self, inputs: Optional[Mapping[str, str]] = None, log: Optional[logging.Logger] = None):
        super().__init__(log)
        self.inputs = dict(inputs or {})

    def read_raw(self, name: str) -> Optional[str]:
        return self.inputs.get(name)

    def with_overrides(self, overrides: Mapping[str, Optional[str]]) -> "MappingRunContext":
        """Return a copy where every non-None override replaces the stored input."""
        merged = dict(self.inputs)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return MappingRunContext(merged, self.logger)


class EnvironmentRunContext(RunContext):
    """
    RunContext reading CI step inputs from the environment.

    A CI runner exposes the input "webhook-url" as INPUT_WEBHOOK-URL:
    spaces become underscores, the name is upper-cased, hyphens are kept.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = "INPUT_",
        log: Optional[logging.Logger] = None,
    ):
        super().__init__(log)
        self.environ = os.environ if environ is None else environ
        self.prefix = prefix

    def env_name(self, name: str) -> str:
        return f"{self.prefix}{name.replace(' ', '_').upper()}"

    def read_raw(self, name: str) -> Optional[str]:
        return self.environ.get(self.env_name(name))

    def to_mapping(self, names) -> MappingRunContext:
        """Snapshot the given inputs into a MappingRunContext."""
        inputs = {}
        for name in names:
            value = self.read_raw(name)
            if value is not None:
                inputs[name] = value
        return MappingRunContext(inputs, self.logger)
