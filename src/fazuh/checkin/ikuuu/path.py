class Path:
    """URL paths of the ikuuu service.

    The host is configurable, so the paths are relative and joined with
    `Path.url`.
    """

    LOGIN = "/auth/login"
    CHECKIN = "/user/checkin"

    @staticmethod
    def url(host: str, path: str) -> str:
        return f"https://{host}{path}"
