import os

from flask import current_app


class MenuProcessingConfig:
    """Configuration management for menu processing services, read per request"""

    def __init__(self):
        cfg = current_app.config
        self.capability_provider = cfg.get('CAPABILITY_PROVIDER', 'gemini')
        # Credentials are re-read on every request
        self.gemini_api_key = cfg.get('GEMINI_API_KEY') or os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        self.openai_api_key = cfg.get('OPENAI_API_KEY') or os.getenv("OPENAI_API_KEY")
        self.default_model = cfg['DEFAULT_MODEL']
        self.default_openai_model = cfg['DEFAULT_OPENAI_MODEL']
        self.capability_timeout_s = cfg['CAPABILITY_TIMEOUT_S']
        self.image_provider = cfg.get('IMAGE_PROVIDER', 'keyword')
        self.image_lookup_timeout_s = cfg['IMAGE_LOOKUP_TIMEOUT_S']
        self.max_upload_bytes = cfg['MAX_UPLOAD_BYTES']
