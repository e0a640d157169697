import uuid


class SessionState:
    def __init__(self):
        self.query_text = ""
        self.suggested_accounts = []
        self.active_account = None
        self.repositories = []
        self.expanded_repo = None
        self.readme = None
        self.session_id = uuid.uuid4().hex

    def clear_selection(self):
        self.active_account = None
        self.repositories = []
        self.clear_expansion()

    def clear_expansion(self):
        self.expanded_repo = None
        self.readme = None

    def find_repository(self, name):
        for repo in self.repositories:
            if repo.name == name:
                return repo
        return None
