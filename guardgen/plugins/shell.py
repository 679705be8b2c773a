"""Plugin: run an arbitrary shell command when watched files change."""

from __future__ import annotations

from guardgen.plugins.base import Plugin


class Shell(Plugin):
    name = "shell"
    TEMPLATE = """\
# Add files and commands to this file, like the example:
#   watch(%r{file/path}) { `command(s)` }
#
guard :shell do
  watch(/(.*).txt/) {|m| `tail #{m[0]}` }
end
"""
