# utils/multipart.py - form fields + files for upload requests
import mimetypes
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from urllib3.filepost import encode_multipart_formdata

FilePart = Tuple[str, bytes, str]


class MultipartForm:
    """
    Fields and files sent as a multipart/form-data body.

    Two ways out: encode() builds the body ourselves (so the caller can set the
    Content-Type header explicitly), as_requests_kwargs() leaves the encoding
    to requests.
    """

    def __init__(self, fields: Optional[Dict[str, str]] = None):
        self.fields: Dict[str, str] = dict(fields or {})
        self.files: Dict[str, FilePart] = {}

    def add_field(self, name: str, value) -> "MultipartForm":
        self.fields[name] = str(value)
        return self

    def add_file(self, name: str, filename: str, content,
                 content_type: Optional[str] = None) -> "MultipartForm":
        if hasattr(content, "read"):
            content = content.read()
        if isinstance(content, str):
            content = content.encode("utf-8")
        ctype = content_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        self.files[name] = (filename, content, ctype)
        return self

    def add_file_from_path(self, name: str, path: Union[str, Path],
                           content_type: Optional[str] = None) -> "MultipartForm":
        path = Path(path)
        with path.open("rb") as fh:
            return self.add_file(name, path.name, fh.read(), content_type)

    def encode(self) -> Tuple[bytes, str]:
        """Return (body, content_type); content_type carries the boundary."""
        parts = list(self.fields.items()) + list(self.files.items())
        return encode_multipart_formdata(parts)

    def as_requests_kwargs(self) -> dict:
        return {"data": dict(self.fields), "files": dict(self.files)}

    def __len__(self):
        return len(self.fields) + len(self.files)

    def __repr__(self):
        return f"MultipartForm(fields={sorted(self.fields)}, files={sorted(self.files)})"
