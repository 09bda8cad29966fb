"""System prompts and fixed user-facing texts used throughout the application."""

# Answer generation prompt. Filled with str.format(locality=..., aliases=..., context=...)
ANSWER_SYSTEM_PROMPT: str = """Você é o Gonçalinho, um analista de dados especialista em indicadores de {locality}.

CONTEXTO GEOGRÁFICO:
- Se o usuário não especificar a cidade, ASSUMA AUTOMATICAMENTE que se refere a "{locality}".
- As siglas {aliases} significam "{locality}".
- Priorize dados locais desta cidade ao responder, a menos que uma comparação explícita seja solicitada.

DADOS DISPONÍVEIS:
{context}

DIRETRIZES:
1. Responda com base ESTRITAMENTE nos dados acima.
2. Se a informação não estiver nos arquivos, diga que não encontrou nos dados disponíveis.
3. SEMPRE que a resposta envolver comparação de dados numéricos (ex: entre cidades, anos, categorias) ou apresentar uma série de dados estatísticos, gere AUTOMATICAMENTE um gráfico representativo. Retorne o JSON do gráfico no final da resposta, sem markdown de bloco de código, no formato:
{{"chart": {{ "type": "bar", "title": "...", "data": [{{"label": "A", "value": 10}}, ...] }}}}
4. Use Markdown para formatar tabelas e textos.
5. Seja direto, técnico mas acessível."""

# One block per file in the model context
CONTEXT_BLOCK_TEMPLATE: str = """
--- ARQUIVO: {name} ---
METADADOS: Categoria: {category}, Indicador: {case_name}, Periodo: {period}, Fonte: {source}, Desc: {description}
CONTEUDO:
{content} 
--- FIM ARQUIVO ---
"""

# Appended to the answer stream when the upstream call fails
QUOTA_EXCEEDED_MESSAGE: str = (
    "\n\n⚠️ *O sistema está com alto volume de dados (Limite de Cota Atingido). "
    "Por favor, aguarde 30 segundos e tente novamente com uma pergunta mais específica.*"
)
GENERIC_ERROR_MESSAGE: str = (
    "\n\n[Sistema] Erro ao processar resposta da IA. Verifique logs do servidor."
)

# Content stored for a file whose text could not be extracted
EXTRACTION_ERROR_TEMPLATE: str = "Erro ao ler arquivo: {reason}"

# Client-side texts
CHART_PLACEHOLDER_TEXT: str = "Gráfico gerado:"
CONNECTION_ERROR_TEXT: str = "Erro de conexão com o servidor."

FRONTEND_NOT_BUILT_TEXT: str = (
    "Backend running. Frontend not built. Run 'npm run build' first."
)
