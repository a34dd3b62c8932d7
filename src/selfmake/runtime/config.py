from __future__ import annotations

"""Environment-driven toolchain configuration.

Variables:
    CXX           compiler command, whitespace-tokenized (default: detected)
    CXXFLAGS      extra compiler flags, whitespace-tokenized (default: none)
    SELFMAKE_STD  language standard flag (default: -std=c++20)

Tokenization is a plain whitespace split; quoting inside the values is not
supported.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from selfmake.constants import DEFAULT_STD_FLAG, ENV_COMPILER, ENV_FLAGS, ENV_STD
from selfmake.core.models import Command
from selfmake.runtime.toolchain import detect_compiler


def env_args(name: str, default: Sequence[str] = (), env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the whitespace tokens of `$name`, or *default* if unset or blank."""
    source = os.environ if env is None else env
    tokens = (source.get(name) or '').split()
    return tokens if tokens else list(default)


@dataclass(frozen=True)
class ToolchainConfig:
    """Compiler command pieces shared by the rebuild and the compile step."""
    compiler: List[str]
    flags: List[str] = field(default_factory=list)
    std_flag: str = DEFAULT_STD_FLAG

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'ToolchainConfig':
        source = os.environ if env is None else env
        compiler = env_args(ENV_COMPILER, (), source) or [detect_compiler()]
        flags = env_args(ENV_FLAGS, (), source)
        std = (source.get(ENV_STD) or '').strip() or DEFAULT_STD_FLAG
        return cls(compiler=compiler, flags=flags, std_flag=std)

    def compile_command(
        self,
        inputs: Sequence[str | os.PathLike[str]],
        *,
        output: Optional[str | os.PathLike[str]] = None,
        include_dirs: Sequence[str | os.PathLike[str]] = (),
    ) -> List[str]:
        """Build `[compiler..., flags..., std, -I dir..., -o output, inputs...]`."""
        cmd = Command(self.compiler, self.flags, self.std_flag)
        cmd.append(['-I' + os.fspath(d) for d in include_dirs])
        if output is not None:
            cmd.append('-o', output)
        cmd.append(inputs)
        return cmd.argv
