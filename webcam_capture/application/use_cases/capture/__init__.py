from .run_capture import RunCaptureUseCase, build_storage_key

__all__ = [
    "RunCaptureUseCase",
    "build_storage_key",
]
