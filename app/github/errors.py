class GitHubClientError(Exception):
    pass


class GitHubTransportError(GitHubClientError):
    pass


class GitHubParseError(GitHubClientError):
    pass


class GitHubStatusError(GitHubClientError):
    def __init__(self, status_code: int, url: str):
        super().__init__(f"GitHub returned {status_code} for {url}")
        self.status_code = status_code
