# services/negotiator.py
import io
import mimetypes

import structlog
from flask import send_file
from werkzeug.datastructures import Headers

from blockserve.common.errors import DecodeError, EncodeError
from blockserve.models.data_block import DataBlock

logger = structlog.get_logger()


class ContentNegotiator:
    @staticmethod
    def client_accepts_gzip(request) -> bool:
        """True if the request's Accept-Encoding allows gzip (explicitly or through *)."""
        qualities = {value.lower(): quality for value, quality in request.accept_encodings}
        if "gzip" in qualities:
            return qualities["gzip"] > 0
        return qualities.get("*", 0) > 0

    @staticmethod
    def negotiate(block: DataBlock, can_gzip: bool, gzip_threshold: int) -> Headers:
        """
        Bring the block into the representation the client gets and return the
        encoding headers that describe it.

        The threshold is compared against the block's current length, so a block
        that is already compressed is measured by its compressed size.
        Raises DecodeError if a client without gzip support gets a block that
        can not be decompressed.
        """
        headers = Headers()
        over_threshold = block.length > gzip_threshold

        if not can_gzip:
            try:
                block.decompress()
            except DecodeError as e:
                # no uncompressed bytes to send, abort the request
                logger.error("negotiate_decompress_failed", error=str(e), length=block.length)
                raise
        elif block.is_compressed() or over_threshold:
            headers.set("Content-Encoding", "gzip")
            headers.add("Vary", "Accept-Encoding")
            if over_threshold:
                try:
                    block.compress()
                except EncodeError as e:
                    # serve uncompressed data if gzip fails
                    logger.error("negotiate_compress_failed", error=str(e), length=block.length)
                    headers.set("Content-Encoding", "identity")
        return headers

    @staticmethod
    def serve(block: DataBlock, can_gzip: bool, gzip_threshold: int, name: str):
        """
        Build the response for one block. Ranges and conditional requests are
        handled by send_file.

        Only the type part of the guessed mimetype is passed on: a name like
        x.tar.gz must not make send_file add its own Content-Encoding.
        """
        headers = ContentNegotiator.negotiate(block, can_gzip, gzip_threshold)
        mimetype = mimetypes.guess_type(name)[0] or "application/octet-stream"
        rv = send_file(
            io.BytesIO(block.data),
            mimetype=mimetype,
            download_name=name,
            conditional=True,
            etag=False,
            last_modified=None,
        )
        rv.headers.remove("Content-Encoding")
        rv.headers.extend(headers)
        return rv
