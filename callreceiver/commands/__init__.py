from .config import config
from .doctor import doctor
from .init import init
from .log import log
from .prebuild import prebuild
from .version import version

__all__ = ["config", "doctor", "init", "log", "prebuild", "version"]
