import codecs
import sys
from typing import Optional
from urllib.parse import urlparse

import requests


def success(*parts) -> None:
    print(' '.join(parts))


def error(*parts) -> None:
    print(' '.join(parts), file=sys.stderr)


def detail(*parts) -> None:
    print(' '.join(parts), file=sys.stderr)


def print_reader(response: requests.Response) -> None:
    """Copy whatever is left of the response body to stderr, byte for byte."""
    sys.stderr.flush()
    out = getattr(sys.stderr, 'buffer', None)
    if out is not None:
        for chunk in response.iter_content(chunk_size=8192):
            out.write(chunk)
        out.write(b'\n')
        out.flush()
        return
    # text-only stream: decode across chunk boundaries
    decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
    for chunk in response.iter_content(chunk_size=8192):
        sys.stderr.write(decoder.decode(chunk))
    sys.stderr.write(decoder.decode(b'', final=True) + '\n')
    sys.stderr.flush()


def host_of(url: str) -> str:
    return urlparse(url).netloc


def http_do(request: requests.PreparedRequest, timeout: float,
            description: str) -> Optional[requests.Response]:
    """
    Send a prepared request and return the streamed response.

    Transport errors are reported here and result in None, so callers
    only have to deal with HTTP statuses. The caller owns the returned
    response and must close it.
    """
    try:
        with requests.Session() as session:
            return session.send(request, timeout=timeout, stream=True)
    except requests.exceptions.RequestException as e:
        error('Could not connect to', description.lower(), 'at', host_of(request.url))
        detail(str(e))
        return None
