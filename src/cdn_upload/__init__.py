"""Upload service: accepts multipart uploads and writes them under a base directory."""
