"""
VTT loading for podvtt.

Reads caption documents from local files or HTTP(S) URLs, runs them through
the parser and transcript renderer, and optionally saves the transcript.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from .models import Caption, TranscriptConfig
from .parser import parse_vtt_or_raise, VTTParseError
from .transcript import format_transcript, render_transcript

logger = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    """
    Check if a source string is an HTTP(S) URL rather than a local path.

    Example:
        >>> is_url("https://example.com/episode-1.vtt")
        True
        >>> is_url("captions/episode-1.vtt")
        False
    """
    return source.startswith(("http://", "https://"))


def read_vtt_file(vtt_path: str, encoding: str = "utf-8") -> List[Caption]:
    """
    Read and parse a VTT file.

    Line endings are read as-is, so files saved with CRLF endings are
    rejected just like CRLF content passed to the parser directly.

    Args:
        vtt_path: Path to VTT file
        encoding: File encoding (default: utf-8)

    Returns:
        Parsed captions

    Raises:
        FileNotFoundError: If the file doesn't exist
        VTTParseError: If the file isn't valid VTT
    """
    if not os.path.exists(vtt_path):
        raise FileNotFoundError(f"VTT file not found: {vtt_path}")

    logger.info(f"Reading VTT file: {vtt_path}")
    with open(vtt_path, 'r', encoding=encoding, newline='') as f:
        content = f.read()

    try:
        captions = parse_vtt_or_raise(content)
    except VTTParseError:
        logger.error(f"Failed to parse VTT file: {vtt_path}")
        raise VTTParseError(f"Failed to parse VTT file: {vtt_path}")

    logger.info(f"Parsed {len(captions)} captions from {vtt_path}")
    return captions


def download_vtt_content(
    url: str,
    timeout: int = 30,
    verify_ssl: bool = True,
    encoding: str = "utf-8"
) -> str:
    """
    Download VTT content from an HTTP(S) URL.

    Args:
        url: URL of the VTT file
        timeout: Request timeout in seconds (default: 30)
        verify_ssl: Whether to verify SSL certificates (default: True)
        encoding: Encoding of the response body (default: utf-8)

    Returns:
        Response body as text

    Raises:
        requests.RequestException: If the request fails or returns an error status
    """
    logger.info(f"Downloading VTT from URL: {url}")
    try:
        response = requests.get(url, timeout=timeout, verify=verify_ssl)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to download VTT from {url}: {str(e)}")
        raise
    # requests falls back to ISO-8859-1 for text/vtt without a charset
    response.encoding = encoding
    return response.text


def read_vtt_url(
    url: str,
    timeout: int = 30,
    verify_ssl: bool = True,
    encoding: str = "utf-8"
) -> List[Caption]:
    """
    Download and parse a VTT file.

    Raises:
        requests.RequestException: If the download fails
        VTTParseError: If the downloaded content isn't valid VTT
    """
    content = download_vtt_content(url, timeout=timeout, verify_ssl=verify_ssl, encoding=encoding)
    try:
        captions = parse_vtt_or_raise(content)
    except VTTParseError:
        logger.error(f"Failed to parse VTT downloaded from {url}")
        raise VTTParseError(f"Failed to parse VTT downloaded from {url}")

    logger.info(f"Parsed {len(captions)} captions from {url}")
    return captions


def save_transcript(lines: List[str], output_file: str, encoding: str = "utf-8") -> str:
    """
    Write transcript lines to a file, creating parent directories.

    Returns:
        The output file path
    """
    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
    with open(output_file, 'w', encoding=encoding, newline='') as f:
        f.write(format_transcript(lines))
    logger.info(f"Saved transcript with {len(lines)} lines to {output_file}")
    return output_file


class TranscriptBuilder:
    """
    Builds speaker-segmented transcripts from VTT sources.

    Handles the complete pipeline:
    - Loading VTT content from a string, a local file or a URL
    - Parsing it into captions
    - Rendering the transcript and optionally saving it
    """

    def __init__(self, timeout: int = 30, verify_ssl: bool = True, encoding: str = "utf-8"):
        """
        Initialize transcript builder.

        Args:
            timeout: Request timeout in seconds for URL sources
            verify_ssl: Whether to verify SSL certificates for URL sources
            encoding: Encoding used for files and downloaded content
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.encoding = encoding

    def load(self, source: str) -> List[Caption]:
        """Load captions from a local path or an HTTP(S) URL."""
        if is_url(source):
            return read_vtt_url(
                source, timeout=self.timeout, verify_ssl=self.verify_ssl, encoding=self.encoding
            )
        return read_vtt_file(source, encoding=self.encoding)

    def build(self, source: str, output_file: Optional[str] = None) -> List[str]:
        """Build a transcript from a local path or an HTTP(S) URL."""
        return self.render(self.load(source), output_file)

    def build_from_content(self, vtt_content: str, output_file: Optional[str] = None) -> List[str]:
        """
        Build a transcript from VTT content (no input file I/O).

        Raises:
            VTTParseError: If the content isn't valid VTT
        """
        return self.render(parse_vtt_or_raise(vtt_content), output_file)

    def build_from_file(self, vtt_path: str, output_file: Optional[str] = None) -> List[str]:
        """
        Build a transcript from a local VTT file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            VTTParseError: If the file isn't valid VTT
        """
        return self.render(read_vtt_file(vtt_path, encoding=self.encoding), output_file)

    def build_from_url(self, url: str, output_file: Optional[str] = None) -> List[str]:
        """
        Build a transcript from a VTT file served over HTTP(S).

        Raises:
            requests.RequestException: If the download fails
            VTTParseError: If the downloaded content isn't valid VTT
        """
        captions = read_vtt_url(
            url, timeout=self.timeout, verify_ssl=self.verify_ssl, encoding=self.encoding
        )
        return self.render(captions, output_file)

    def render(self, captions: List[Caption], output_file: Optional[str] = None) -> List[str]:
        """Render captions as transcript lines, saving them if output_file is set."""
        lines = render_transcript(captions)
        logger.info(f"Rendered {len(captions)} captions into {len(lines)} transcript lines")
        if output_file:
            save_transcript(lines, output_file, encoding=self.encoding)
        return lines


def transcript_from_config(config: TranscriptConfig) -> Dict[str, Any]:
    """
    Build a transcript using a TranscriptConfig object.

    Returns:
        Dictionary containing:
            - source: The configured source
            - output_file: Where the transcript was saved, or None
            - captions_count: Number of captions parsed
            - lines_count: Number of transcript lines rendered
    """
    builder = TranscriptBuilder(
        timeout=config.timeout,
        verify_ssl=config.verify_ssl,
        encoding=config.encoding,
    )
    captions = builder.load(config.source)
    lines = builder.render(captions, config.output_file)

    return {
        "source": config.source,
        "output_file": config.output_file,
        "captions_count": len(captions),
        "lines_count": len(lines),
    }
