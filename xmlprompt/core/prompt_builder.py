import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping, Optional, Tuple

from xmlprompt.core.configs import PromptSettings
from xmlprompt.core.errors import MissingPromptValuesError
from xmlprompt.prompts.parser import object_to_xml, simple_xml_tag
from xmlprompt.prompts.template import (
    extract_placeholders,
    replace_template_variables,
    to_json,
)

logger = logging.getLogger(__name__)

PromptFunction = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class Example:
    """A few-shot example: the input is rendered as XML, the output as JSON."""

    input: Any
    output: Any


@dataclass(frozen=True)
class PromptBuilder:
    """
    Immutable builder for XML-structured prompts.

    Every method returns a new builder, so a partially configured builder can
    be shared and extended in different directions without interference.

    Example:
        render = (
            prompt_builder()
            .instruction("Analyze the {{data_type}}")
            .example({"data": "sample"}, {"result": "processed"})
            .task_key("user_id")
            .task_key("data")
            .build()
        )
        render({"data_type": "user activity", "user_id": 456, "data": "click events"})
    """

    instruction_template: str = ""
    examples: Tuple[Example, ...] = ()
    task_keys: Tuple[str, ...] = ()

    def instruction(self, template: str) -> "PromptBuilder":
        """
        Set the instruction template, which may contain {{placeholder}} variables.

        Args:
            template: The instruction template string

        Returns:
            A new builder with the instruction replaced
        """
        return replace(self, instruction_template=template)

    def example(self, input: Any, output: Any) -> "PromptBuilder":
        """
        Append a few-shot example.

        Args:
            input: The example input, rendered as XML
            output: The expected output, rendered as compact JSON

        Returns:
            A new builder with the example appended
        """
        return replace(self, examples=self.examples + (Example(input, output),))

    def task_key(self, key: str) -> "PromptBuilder":
        """
        Append a key to copy from the runtime values into the <task> section.

        Args:
            key: The key name to extract from values

        Returns:
            A new builder with the key appended
        """
        return replace(self, task_keys=self.task_keys + (key,))

    def required_keys(self) -> Tuple[str, ...]:
        """Placeholder names followed by task keys, without repeats."""
        names = extract_placeholders(self.instruction_template) + self.task_keys
        return tuple(dict.fromkeys(names))

    def build(
        self,
        strict: Optional[bool] = None,
        max_depth: Optional[int] = None,
        settings: Optional[PromptSettings] = None,
    ) -> PromptFunction:
        """
        Compile the configuration into a prompt function.

        Nothing is read from config files or the environment here; pass
        ``settings=get_default_settings()`` to opt in to the user's settings.

        Args:
            strict: Raise when values lack a placeholder or task key instead of
                leaving the placeholder in place / skipping the key
            max_depth: Nesting limit for XML serialization
            settings: Fallback for ``strict`` and ``max_depth`` when they are
                not given. Defaults to ``PromptSettings()`` (lenient, depth 64).

        Returns:
            A function that accepts a mapping of values and returns the prompt
        """
        settings = settings or PromptSettings()
        strict = settings.strict if strict is None else strict
        max_depth = settings.max_depth if max_depth is None else max_depth

        instruction = self.instruction_template
        examples = self.examples
        task_keys = tuple(dict.fromkeys(self.task_keys))
        required = self.required_keys()

        logger.debug(
            f"Built prompt: {len(examples)} example(s), task keys {list(task_keys)}, "
            f"strict={strict}, max_depth={max_depth}"
        )

        def render(values: Mapping[str, Any]) -> str:
            if strict:
                missing = [key for key in required if key not in values]
                if missing:
                    logger.warning(f"Prompt values missing required keys: {missing}")
                    raise MissingPromptValuesError(missing)

            sections = [
                f"<instructions>{replace_template_variables(instruction, values)}</instructions>"
            ]

            if examples:
                items = "".join(
                    f'\n<example index="{i}">'
                    f"<input>{object_to_xml(ex.input, max_depth=max_depth)}</input>"
                    f"<output>{to_json(ex.output)}</output>"
                    "</example>"
                    for i, ex in enumerate(examples)
                )
                sections.append(f"<examples>{items}\n</examples>")

            if task_keys:
                # One element per present key; values start at depth 0
                task = "".join(
                    simple_xml_tag(key, object_to_xml(values[key], max_depth=max_depth))
                    for key in task_keys
                    if key in values
                )
                sections.append(f"<task>{task}</task>")

            return "\n\n".join(sections)

        return render


def prompt_builder() -> PromptBuilder:
    """
    Start a new, empty prompt builder.

    Example:
        render = prompt_builder().instruction("Hello {{name}}").task_key("user_id").build()
        render({"name": "Alice", "user_id": 123})
    """
    return PromptBuilder()
