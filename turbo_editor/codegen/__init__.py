# turbo_editor/codegen/__init__.py
"""
Code generation - compiles a scene snapshot into Turbo DSL source.
"""

from .formatting import format_number, format_color
from .emitters import Emitter, register_emitter, get_emitter, UNIMPLEMENTED
from .generator import CodeGenerator, generate_turbo_code

__all__ = [
    'CodeGenerator',
    'generate_turbo_code',
    'Emitter',
    'register_emitter',
    'get_emitter',
    'UNIMPLEMENTED',
    'format_number',
    'format_color',
]
