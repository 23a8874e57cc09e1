import logging
from .constants import DEFAULT_ACCEPT, DEFAULT_MIME_TYPE, FORMAT_MAP
from .exceptions import ConfigError
from yaml import load, YAMLError
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

logger = logging.getLogger(__name__)


class Config():
    """Object representing the options from a configuration file."""
    def __init__(self, configfile=None, console=None):
        console = console or logger

        # initialize config defaults (will be overidden below if in config)
        self.server = None
        self.timeout = 50
        self.accept = DEFAULT_ACCEPT
        self.mime_type = DEFAULT_MIME_TYPE
        self.workers = 4
        self.verify_ssl = True

        if configfile is None:
            return

        console.info(
            "Loading configuration options from {0}".format(configfile)
            )
        try:
            with open(configfile, "r") as f:
                yaml_data = f.read()
            opts = load(yaml_data, Loader=Loader) or {}
        except (OSError, YAMLError) as e:
            raise ConfigError(
                "Cannot read configuration {0}: {1}".format(configfile, e)
                ) from e

        if not isinstance(opts, dict):
            raise ConfigError(
                "Configuration {0} is not a mapping".format(configfile)
                )

        # log the key/value pairs loaded from configuration
        console.info("Loaded the following configuration options:")
        pad = max([len(str(k)) for k in opts.keys()], default=0)
        for key, value in opts.items():
            console.info(
                "  --> {:{align}{pad}} : {}".format(key, value,
                                                    pad=pad, align='>')
                )
            if key == "server":
                self.server = value
            elif key == "timeout":
                self.timeout = value
            elif key == "accept":
                self.accept = value
            elif key == "mimeType":
                self.mime_type = value
            elif key == "workers":
                self.workers = value
            elif key == "verifySsl":
                self.verify_ssl = bool(value)
            else:
                console.warning(
                    "Ignoring unknown configuration option {0}".format(key)
                    )

        self.validate()

    def validate(self):
        if self.mime_type not in FORMAT_MAP:
            raise ConfigError(
                "Unrecognized RDF serialization {0}".format(self.mime_type)
                )
        for name in ("timeout", "workers"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or value <= 0:
                raise ConfigError(
                    "{0} must be a positive number, got {1!r}".format(
                        name, value)
                    )
        self.workers = int(self.workers)
