from selfmake.execution.render import quote_arg, quoted, render_command
from selfmake.execution.runner import ProcessRunner, run

__all__ = ['ProcessRunner', 'quote_arg', 'quoted', 'render_command', 'run']
