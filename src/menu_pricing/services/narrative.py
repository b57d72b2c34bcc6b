"""Narrative commentary on price simulations using an LLM."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from menu_pricing.domain.ingredients import Ingredient
from menu_pricing.domain.pricing import ImpactResult
from menu_pricing.domain.products import Product
from menu_pricing.services.api_keys import ApiKeyService
from menu_pricing.services.pricing import format_percent

_logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "Chave de API não configurada. Adicione sua chave nas configurações "
    "para usar o consultor inteligente."
)
SERVICE_FAILURE_MESSAGE = (
    "Erro ao conectar com o consultor inteligente. "
    "Verifique sua chave de API nas configurações."
)
EMPTY_RESPONSE_MESSAGE = "Não foi possível gerar a análise no momento."


class NarrativeClient(Protocol):
    """Interface for LLM text generation."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        api_key: str,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Return generated text for the prompt."""


@dataclass
class NarrativeService:
    """Service that turns an impact analysis into consultant commentary.

    Never raises: a missing key or any client failure yields an advisory
    text instead.
    """

    client: NarrativeClient
    api_key_service: ApiKeyService
    model: str
    reasoning_effort: str | None
    store: bool

    async def generate(
        self,
        product: Product,
        ingredients: Sequence[Ingredient],
        impact: ImpactResult,
    ) -> str:
        """Generate commentary for a simulation of the given product."""
        try:
            resolved = self.api_key_service.resolve()
        except Exception:
            _logger.exception("Failed to read the stored API key")
            return SERVICE_FAILURE_MESSAGE
        if resolved is None:
            _logger.warning("Narrative requested without an API key")
            return MISSING_KEY_MESSAGE

        prompt = build_prompt(product, ingredients, impact)
        try:
            text = await self.client.generate(
                api_key=resolved.value,
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=prompt,
            )
        except Exception:
            _logger.exception(
                "Narrative generation failed",
                extra={"product_id": product.id, "key_source": resolved.source},
            )
            return SERVICE_FAILURE_MESSAGE
        return text.strip() or EMPTY_RESPONSE_MESSAGE


def build_prompt(
    product: Product, ingredients: Sequence[Ingredient], impact: ImpactResult
) -> str:
    """Build the consultant prompt from computed figures and the recipe."""
    names = {ingredient.id: ingredient.name for ingredient in ingredients}
    recipe = "\n".join(
        f"- {names.get(line.ingredient_id, 'Insumo desconhecido')}: "
        f"{line.quantity_used:g} {line.usage_unit}"
        for line in product.recipe_lines
    )
    return (
        "Atue como um consultor sênior de restaurantes e finanças.\n"
        "Analise a seguinte simulação de precificação para o produto "
        f'"{product.name}":\n\n'
        "Cenário Anterior:\n"
        f"- Custo Direto: R$ {impact.direct_cost_before:.2f}\n"
        f"- Preço de Venda Sugerido: R$ {impact.price_before:.2f}\n\n"
        "Novo Cenário (Simulação):\n"
        f"- Custo Direto: R$ {impact.direct_cost_after:.2f}\n"
        f"- Preço de Venda Sugerido: R$ {impact.price_after:.2f}\n\n"
        "Lista de Ingredientes (Ficha Técnica):\n"
        f"{recipe}\n\n"
        "Margem de Lucro Alvo: "
        f"{format_percent(product.costs.target_margin_percent)}%\n"
        f"Impostos/Taxas: {format_percent(product.costs.tax_percent)}%\n\n"
        "Dê um parecer curto (máximo 3 parágrafos) sobre esta alteração.\n"
        "Se o preço subiu, sugira como justificar isso ao cliente ou onde "
        "tentar economizar.\n"
        "Se o preço desceu, sugira se vale a pena manter o preço antigo para "
        "aumentar a margem ou repassar o desconto para ganhar volume."
    )
