from typing import Optional

from requests.models import CaseInsensitiveDict

from bundle_sim.utils.misc import __version__, _python_version

USER_AGENT: str = f"BundleSim/{__version__} (Python/{_python_version})"
JSON_CONTENT_TYPE = "application/json"


class RPCHeaders(CaseInsensitiveDict):
    """
    A dict-like data-structure for HTTP-headers.
    It is case-insensitive and appends user-agent strings
    rather than overrides.
    """

    def __setitem__(self, key, value):
        if key.lower() != "user-agent" or not self.__contains__("user-agent"):
            return super().__setitem__(key, value)

        # Handle appending the user-agent (without replacing).
        existing_user_agent = self.__getitem__("user-agent")
        parts = [a.strip() for a in value.split(" ")]
        new_parts = []
        for part in parts:
            if part in existing_user_agent:
                # Already added.
                continue
            else:
                new_parts.append(part)

        if new_user_agent := " ".join(new_parts):
            super().__setitem__(key, f"{existing_user_agent} {new_user_agent}")


def create_headers(extra_headers: Optional[dict] = None) -> RPCHeaders:
    """
    Create the headers for a simulation POST: a JSON content-type,
    the bundle-sim user-agent, and any caller-supplied headers.

    Args:
        extra_headers (Optional[dict]): Additional headers. A ``User-Agent``
          here is appended to the default one.

    Returns:
        :class:`~bundle_sim.utils.rpc.RPCHeaders`
    """
    headers = RPCHeaders()
    headers["User-Agent"] = USER_AGENT
    for key, value in (extra_headers or {}).items():
        headers[key] = value

    # Always JSON, regardless of what the caller passed.
    headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers
