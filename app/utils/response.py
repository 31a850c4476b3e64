def error_response(message: str) -> dict:
    return {"error": message}
