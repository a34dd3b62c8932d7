from selfmake.resolution.resolver import IncludeResolver, resolve

__all__ = ['IncludeResolver', 'resolve']
