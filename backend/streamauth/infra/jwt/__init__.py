from .flask_jwt_token_codec import JWTTokenCodec

__all__ = ["JWTTokenCodec"]
