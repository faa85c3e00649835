from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field

from bundle_sim.utils.basemodel import PassThroughModel


class BuiltinTracer(str, Enum):
    """
    The tracers geth ships with.
    """

    CALL = "callTracer"
    PRESTATE = "prestateTracer"
    FOUR_BYTE = "4byteTracer"
    NOOP = "noopTracer"
    MUX = "muxTracer"
    FLAT_CALL = "flatCallTracer"


class TracingOptions(PassThroughModel):
    """
    Debug tracing options, as accepted by geth's ``debug_traceCall``.
    When no ``tracer`` is set, the node uses its struct-logger and the
    ``disable*``/``enable*`` flags apply.
    """

    tracer: Optional[Union[BuiltinTracer, str]] = None
    """
    A built-in tracer name or the source of a JavaScript tracer.
    """

    tracer_config: Optional[dict[str, Any]] = Field(None, alias="tracerConfig")
    timeout: Optional[str] = None
    disable_storage: Optional[bool] = Field(None, alias="disableStorage")
    disable_stack: Optional[bool] = Field(None, alias="disableStack")
    enable_memory: Optional[bool] = Field(None, alias="enableMemory")
    enable_return_data: Optional[bool] = Field(None, alias="enableReturnData")

    @classmethod
    def for_tracer(
        cls, tracer: Union[BuiltinTracer, str], **tracer_config: Any
    ) -> "TracingOptions":
        """
        Options that run a single tracer.

        Usage example::

            TracingOptions.for_tracer(BuiltinTracer.CALL, onlyTopCall=True)

        Args:
            tracer (Union[BuiltinTracer, str]): The tracer to run.
            **tracer_config: Passed through as ``tracerConfig``.

        Returns:
            :class:`~bundle_sim.types.trace.TracingOptions`
        """
        return cls(tracer=tracer, tracer_config=tracer_config or None)
