"""
Vue generator implementation.

Runs the whole pipeline for one component: state extraction, assembly of the
options object, printing, and framing the script as a single-file component
or a plain module.
"""

from typing import Mapping, Optional, Sequence

from ...logging_config import get_logger
from ...uidl import ComponentUIDL, EventHandlerStatement
from ..core.builder import SyntaxBuilder
from ..core.config import GeneratorConfig
from ..core.generator import CodeGenerator
from ..core.printer import JSPrinter
from .component import ComponentAssembler
from .state import extract_state_object

logger = get_logger(__name__)

GENERATED_HEADER = "Generated from UIDL component {name}. Do not edit by hand."


class VueGenerator(CodeGenerator):
    """Code generator for Vue option-API components."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        builder: Optional[SyntaxBuilder] = None,
    ):
        """Initialize Vue generator with configuration."""
        super().__init__(config)
        self.builder = builder or SyntaxBuilder()
        self.printer = JSPrinter(self.config)

    @property
    def language_name(self) -> str:
        return "vue"

    @property
    def file_extension(self) -> str:
        return ".js" if self.config.output_format == "js" else ".vue"

    def generate(
        self,
        uidl: ComponentUIDL,
        dependencies: Sequence[str] = (),
        methods: Optional[Mapping[str, Sequence[EventHandlerStatement]]] = None,
    ) -> str:
        """Generate the component source; diagnostics land in ``self.diagnostics``."""
        self.diagnostics.clear()

        data = extract_state_object(uidl.state_definitions)
        assembler = ComponentAssembler(self.builder, self.diagnostics)
        declaration = assembler.assemble(uidl, dependencies, data, methods or {})

        script = self.printer.print(declaration)

        context = {
            "script": script,
            "header": GENERATED_HEADER.format(name=uidl.name)
            if self.config.add_comments
            else None,
        }
        template_name = f"component{self.file_extension}"
        logger.debug("Rendering %s with template %s", uidl.name, template_name)

        return self.template_engine.render_template(template_name, context)
