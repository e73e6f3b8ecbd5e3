"""
Invocation of named actions on a remote UPnP service.
"""

import asyncio
import logging
from typing import Any, List, Optional, Protocol, Sequence, Tuple

import requests
from upnpclient.soap import SOAPError, SOAPProtocolError
from upnpclient.upnp import UPNPError

from .errors import RemoteActionFault

logger = logging.getLogger(__name__)

ActionArguments = Sequence[Tuple[str, Any]]
ActionResult = List[Tuple[str, Any]]


class ActionInvoker(Protocol):
    """Invokes a single action on a service endpoint and returns its output arguments."""

    async def invoke(self, endpoint: Any, action_name: str, args: ActionArguments) -> ActionResult:
        ...


class UpnpClientInvoker:
    """
    Action invoker backed by upnpclient service objects.

    upnpclient performs blocking SOAP requests, so each call runs in a worker
    thread. SOAP faults, HTTP failures, unknown actions, rejected arguments and
    incomplete responses are reported as RemoteActionFault; this class never
    retries.
    """

    async def invoke(self, endpoint: Any, action_name: str, args: ActionArguments) -> ActionResult:
        kwargs = dict(args)
        logger.debug(f"Invoking {action_name} on {getattr(endpoint, 'service_type', endpoint)} with {kwargs}")
        result = await asyncio.to_thread(self._call, endpoint, action_name, kwargs)
        return list((result or {}).items())

    def _call(self, endpoint: Any, action_name: str, kwargs: dict) -> dict:
        try:
            action = getattr(endpoint, action_name)
        except AttributeError as e:
            logger.warning(f"{action_name} is not offered by {getattr(endpoint, 'service_type', endpoint)}")
            raise RemoteActionFault(None, str(e), action=action_name) from e
        try:
            return action(**kwargs)
        except SOAPError as e:
            code, message = _soap_fault(e)
            logger.warning(f"{action_name} fault {code}: {message}")
            raise RemoteActionFault(code, message, action=action_name) from e
        except SOAPProtocolError as e:
            logger.warning(f"Malformed response to {action_name}: {e}")
            raise RemoteActionFault(None, str(e), action=action_name) from e
        except requests.RequestException as e:
            logger.warning(f"Request error for {action_name}: {e}")
            raise RemoteActionFault(None, str(e), action=action_name) from e
        except UPNPError as e:
            logger.warning(f"Invalid arguments for {action_name}: {e}")
            raise RemoteActionFault(None, str(e), action=action_name) from e
        except KeyError as e:
            logger.warning(f"Response to {action_name} is missing argument {e}")
            raise RemoteActionFault(None, f"Missing output argument {e}", action=action_name) from e


def _soap_fault(error: SOAPError) -> Tuple[Optional[int], str]:
    """Extract the UPnP error code and description carried by a SOAPError."""
    if len(error.args) >= 2:
        code, message = error.args[0], error.args[1]
        try:
            code = int(code)
        except (TypeError, ValueError):
            code = None
        return code, str(message)
    return None, str(error)
