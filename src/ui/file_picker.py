"""Browser-local file picker.

A native ``<input type="file">`` whose change handler runs in the browser
and emits only the chosen file's name. File contents never leave the
browser.
"""

from typing import Any

FILE_NAME_JS = "(e) => emit(e.target.files[0]?.name ?? null)"


def picked_file_name(args: Any) -> str | None:
    """Normalize the emitted event arguments to a file name or None."""
    if isinstance(args, list):
        args = args[0] if args else None
    if not isinstance(args, str) or not args.strip():
        return None
    return args


def clear_input_js(element_id: int) -> str:
    """JavaScript that resets the picker so the same file can be chosen again."""
    return f'getHtmlElement({element_id}).value = ""'
