from selfmake.runtime.config import ToolchainConfig, env_args
from selfmake.runtime.toolchain import classify_compiler, detect_compiler

__all__ = ['ToolchainConfig', 'classify_compiler', 'detect_compiler', 'env_args']
