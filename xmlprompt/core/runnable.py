"""LangChain integration.

Wraps a prompt so it can sit at the head of an LCEL chain::

    chain = to_runnable(builder, settings=get_default_settings()) | llm
    chain.invoke({"text": "..."})
"""

from typing import Optional, Union

from langchain_core.runnables import RunnableLambda

from xmlprompt.core.configs import PromptSettings
from xmlprompt.core.prompt_builder import PromptBuilder, PromptFunction


def to_runnable(
    prompt: Union[PromptBuilder, PromptFunction],
    name: str = "xml_prompt",
    settings: Optional[PromptSettings] = None,
) -> RunnableLambda:
    """
    Wrap a builder or a built prompt function in a RunnableLambda.

    Builders are built with ``settings`` (lenient defaults when omitted);
    already built functions are wrapped as-is.
    """
    render = prompt.build(settings=settings) if isinstance(prompt, PromptBuilder) else prompt
    if not callable(render):
        raise TypeError(f"Expected a PromptBuilder or callable, got {type(prompt).__name__}")
    return RunnableLambda(render, name=name)
