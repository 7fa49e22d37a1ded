"""Root test configuration."""

import logging

import pytest
import structlog


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


class FakeSsmClient:
    """In-memory stand-in for the SSM client, paging GetParametersByPath results."""

    def __init__(self, parameters: dict[str, str] | None = None, page_size: int = 2):
        self.parameters = dict(parameters or {})
        self.page_size = page_size
        self.requests: list[dict] = []

    def get_parameters_by_path(self, **request):
        self.requests.append(request)
        matches = [
            {"Name": name, "Value": value, "Type": "String"}
            for name, value in sorted(self.parameters.items())
            if name.startswith(request["Path"])
        ]
        start = int(request.get("NextToken", 0))
        page = matches[start : start + self.page_size]
        response = {"Parameters": page}
        if start + self.page_size < len(matches):
            response["NextToken"] = str(start + self.page_size)
        return response


class FakeClientFactory:
    """Client factory returning one fake client regardless of credentials."""

    def __init__(self, client: FakeSsmClient):
        self.client = client
        self.sources: list = []
        self.released: list = []

    def client_for(self, source):
        self.sources.append(source)
        return self.client

    def release(self, source, client):
        self.released.append(source)


@pytest.fixture
def ssm_client():
    return FakeSsmClient()


@pytest.fixture
def client_factory(ssm_client):
    return FakeClientFactory(ssm_client)
