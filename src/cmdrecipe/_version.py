__version_info__ = (0, 25, 0)
__version__ = ".".join(map(str, __version_info__))
