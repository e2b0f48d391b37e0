"""
Prompt builder for yes/no classification requests.

Responsible for:
- Rendering the Jinja2 prompt template with a question and one line of content
- Loading an alternative template from disk when configured

Content is embedded verbatim: no escaping, and template syntax inside the
content is never interpreted.
"""

from pathlib import Path
from typing import Optional
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
import structlog


logger = structlog.get_logger(__name__)

DEFAULT_PROMPT_TEMPLATE = (
    "Question: {{ question }}\n"
    "\n"
    "Content:\n"
    "{{ content }}\n"
    "\n"
    "Answer with only 'yes' or 'no':"
)


class PromptBuilder:
    """
    Build classification prompts from a question and a line of content.

    The default template produces:

        Question: <question>

        Content:
        <content>

        Answer with only 'yes' or 'no':

    Custom templates receive the same ``question`` and ``content`` variables.
    """

    def __init__(self, template_path: Optional[Path] = None):
        """
        Initialize prompt builder.

        Args:
            template_path: Optional Jinja2 template file replacing the default prompt
        """
        self.template_path = Path(template_path) if template_path else None

        if self.template_path is not None:
            self.jinja_env = Environment(
                loader=FileSystemLoader(str(self.template_path.parent)),
                autoescape=False,  # We're generating prompts, not HTML
                undefined=StrictUndefined,
            )
            self.template: Template = self.jinja_env.get_template(self.template_path.name)
            logger.info("Loaded prompt template", template_path=str(self.template_path))
        else:
            self.jinja_env = Environment(autoescape=False, undefined=StrictUndefined)
            self.template = self.jinja_env.from_string(DEFAULT_PROMPT_TEMPLATE)

    def build(self, question: str, content: str) -> str:
        """
        Render the prompt for one line.

        Deterministic: equal inputs always produce the identical string.
        """
        return self.template.render(question=question, content=content)


_default_builder: Optional[PromptBuilder] = None


def build_prompt(question: str, content: str) -> str:
    """Build a prompt with the default template."""
    global _default_builder
    if _default_builder is None:
        _default_builder = PromptBuilder()
    return _default_builder.build(question, content)
