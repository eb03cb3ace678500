pytest_plugins = ["repo_activity.testing.conftest"]
