"""Module source generation."""
from .constants import COMMONJS_EXPORT, ES_MODULE_EXPORT
from .emitter import VariantPair


def export_form(es_module: bool = True) -> str:
    return ES_MODULE_EXPORT if es_module else COMMONJS_EXPORT


def generate_module_source(pair: VariantPair, es_module: bool = True) -> str:
    """Module text exporting the asset reference, or a light/dark object when paired.

    Expressions are inserted as-is; they may be arbitrary code.
    """
    export = export_form(es_module)
    if pair.dark is None:
        return f"{export} {pair.primary.public_expression};"
    return f"{export} {{ light: {pair.primary.public_expression}, dark: {pair.dark.public_expression} }};"
