from .gemini_client import make_client, extract_text_from_response, encode_image_bytes_to_part

__all__ = ["make_client", "extract_text_from_response", "encode_image_bytes_to_part"]
