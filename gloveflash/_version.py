from importlib.metadata import distribution


__version__ = distribution("gloveflash").version
