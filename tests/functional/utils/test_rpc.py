import pytest

from bundle_sim.utils.rpc import USER_AGENT, RPCHeaders, create_headers


class TestRPCHeaders:
    @pytest.fixture
    def headers(self):
        return RPCHeaders()

    @pytest.mark.parametrize("key", ("Content-Type", "CONTENT-TYPE"))
    def test_setitem_key_case_insensitive(self, key, headers):
        headers[key] = "application/javascript"
        headers[key.lower()] = "application/json"
        assert headers[key] == "application/json"
        assert headers[key.lower()] == "application/json"

    def test_setitem_user_agent_does_not_add_twice(self, headers):
        expected = "test-user-agent/1.0"
        headers["User-Agent"] = expected
        # Add again. It should not add twice.
        headers["User-Agent"] = expected
        assert headers["User-Agent"] == expected

    def test_setitem_user_agent_appends(self, headers):
        headers["User-Agent"] = "test0/1.0"
        headers["User-Agent"] = "test1/2.0"
        assert headers["User-Agent"] == "test0/1.0 test1/2.0"


def test_create_headers():
    headers = create_headers()
    assert headers["Content-Type"] == "application/json"
    assert headers["User-Agent"] == USER_AGENT
    assert USER_AGENT.startswith("BundleSim/")


def test_create_headers_extra():
    headers = create_headers({"Content-Type": "text/plain", "User-Agent": "my-bot/0.1"})
    assert headers["content-type"] == "application/json"
    assert headers["user-agent"] == f"{USER_AGENT} my-bot/0.1"
