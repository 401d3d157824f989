class StorageError(Exception):
    """저장소(DB)가 요청한 작업을 끝내지 못했을 때 발생하는 예외"""

    def __init__(self, operation: str, message: str = None):
        self.operation = operation
        super().__init__(message or f"저장소 작업 실패: {operation}")
