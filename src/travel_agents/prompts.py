"""Prompt templates used by the research and supervisor agents."""

from __future__ import annotations

import string
from dataclasses import dataclass


@dataclass(frozen=True)
class PromptTemplate:
    """A text pattern with named ``{slot}`` placeholders."""

    template: str

    @property
    def input_variables(self) -> tuple[str, ...]:
        names = {
            field_name
            for _, field_name, _, _ in string.Formatter().parse(self.template)
            if field_name
        }
        return tuple(sorted(names))

    def format(self, **values: object) -> str:
        missing = [name for name in self.input_variables if name not in values]
        if missing:
            raise ValueError(f"Missing values for prompt variables: {', '.join(missing)}")
        return self.template.format(**{name: values[name] for name in self.input_variables})


RESEARCH_SYSTEM_PROMPT = (
    "Answer the following question as best you can. You have access to tools for searching the web "
    "and for looking up encyclopedic facts. Use them to gather current information about events, "
    "dates, prices and transport before answering; call a tool again with a refined query when a "
    "result is not useful. When you know the final answer, reply with it directly and without "
    "calling any tool."
)

SUPERVISOR_PROMPT = PromptTemplate(
    "Você é um gerente de uma agência de viagens. Sua resposta final deverá ser um roteiro de viagem "
    "completo e detalhado.\n"
    "Utilize o contexto de eventos e preços de passagens, o input do usuário e também os documentos "
    "relevantes para elaborar o roteiro.\n"
    "Contexto: {web_context}\n"
    "Documento relevante: {relevant_documents}\n"
    "Usuário: {query}\n"
    "Assistente: "
)

DEFAULT_QUERY = (
    "Vou viajar para Viena em Novembro de 2024. Quero que faça um roteiro de viagem para mim com os "
    "eventos que irão ocorrer na cidade na data da viagem, citando os melhores dias para ir em cada "
    "local, com o valor do transporte público para os eventos e com o preço das passagens aéreas de "
    "Brasília para Viena."
)
