import re
import json
import threading
from typing import Any, List, Optional

from werkzeug.utils import secure_filename

from ..errors import MenuInputError
from ..models.menu import RawMenuInput, TextMenuInput, ImageMenuInput

_JSON_DECODER = json.JSONDecoder()


def first_json_array(text) -> Optional[List[Any]]:
    """
    Return the first syntactically complete JSON array embedded in `text`.
    Accepts str/bytes/None; returns None when no array decodes.
    """
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8", "ignore")
    if not isinstance(text, str) or not text.strip():
        return None

    start = text.find("[")
    while start != -1:
        try:
            value, _ = _JSON_DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(value, list):
                return value
        start = text.find("[", start + 1)
    return None


def slugify(value: str, default: str = "food") -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (value or "").lower()).strip("-")
    return slug or default


def call_with_timeout(fn, *args, timeout: float = 30.0):
    """
    Run a blocking function in a daemon thread and wait at most `timeout` seconds.
    Raises TimeoutError when the call has not finished in time; re-raises the call's own error otherwise.
    """
    box = {"res": None, "err": None}
    done = threading.Event()

    def worker():
        try:
            box["res"] = fn(*args)
        except Exception as e:
            box["err"] = e
        finally:
            done.set()

    t = threading.Thread(target=worker, daemon=True)
    t.start()

    if not done.wait(timeout):
        raise TimeoutError(f"call did not finish within {timeout:.1f}s")
    if box["err"] is not None:
        raise box["err"]
    return box["res"]


def read_menu_input(form, files, max_upload_bytes: int, json_body: Optional[dict] = None) -> RawMenuInput:
    """
    Build the raw menu input from request fields.
    An uploaded `menuFile` takes precedence over `menuText`.
    """
    upload = files.get("menuFile") if files else None
    if upload and upload.filename:
        data = upload.read()
        if not data:
            raise MenuInputError("Uploaded file is empty")
        if len(data) > max_upload_bytes:
            raise MenuInputError(f"File too large. Maximum size is {max_upload_bytes // (1024 * 1024)}MB")

        mime = (upload.mimetype or "").lower()
        filename = secure_filename(upload.filename) or "upload"
        if mime.startswith("image/"):
            return ImageMenuInput(image_bytes=data, mime_type=mime, filename=filename)
        if mime == "text/plain":
            try:
                text = data.decode("utf-8-sig")
            except UnicodeDecodeError:
                raise MenuInputError("Text files must be UTF-8 encoded")
            return TextMenuInput(text=text, source="file")
        raise MenuInputError(f"Unsupported file type '{mime or 'unknown'}'. Upload an image or a plain text file")

    menu_text = form.get("menuText") if form else None
    if menu_text is None and json_body:
        menu_text = json_body.get("menuText")
    if menu_text is None:
        raise MenuInputError()
    if not isinstance(menu_text, str):
        raise MenuInputError("menuText must be a string")
    return TextMenuInput(text=menu_text)
