"""Environment layer package for variable lookup, lookup logging, and info assembly."""

from .interfaces import EnvironmentLookupPort, InfoLogSinkPort
from .log_sink import LoguruInfoLogSink, logging_configure
from .lookup import MappingEnvironmentLookup, ProcessEnvironmentLookup
from .provider import EnvironmentInfoProvider

__all__ = [
	"EnvironmentLookupPort",
	"InfoLogSinkPort",
	"LoguruInfoLogSink",
	"logging_configure",
	"MappingEnvironmentLookup",
	"ProcessEnvironmentLookup",
	"EnvironmentInfoProvider",
]
