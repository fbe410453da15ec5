#
# PROJECT: kanvas
# MODULE: kanvas/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass


@dataclass
class KanvasConfig:
    """Settings for the terminal back-end and the demo's projection."""
    use_color: bool = True
    use_braille: bool = True
    field_of_view: float = 90.0
    near: float = 0.1
    far: float = 1000.0
    spin_speed: float = 0.8       # radians per second
    background: str = "#0e0e2c"
    foreground: str = "#d0dd14"

    @classmethod
    def detect_terminal(cls) -> 'KanvasConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
