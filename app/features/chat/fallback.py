import re

# Pre-defined proposals used when the completion service is unavailable.
FALLBACK_PROPOSALS: dict[str, list[str]] = {
    "geral": [
        "Defesa de um plano de emergência para o Serviço Nacional de Saúde, incluindo redução das listas de espera e contratação de mais profissionais.",
        "Proposta de reforma fiscal com redução de impostos para a classe média e pequenas empresas para estimular a economia.",
        "Implementação de medidas para combater a crise habitacional, incluindo construção de habitação pública e regulação das rendas.",
        "Plano de investimento em infraestruturas sustentáveis e energia renovável para cumprir metas climáticas.",
        "Reforço do sistema educativo público, com foco na digitalização e modernização das escolas.",
    ],
    "psd": [
        "Defesa da redução fiscal para famílias e empresas como forma de impulsionar o crescimento económico e a criação de emprego.",
        "Plano de reforma do Serviço Nacional de Saúde, promovendo parcerias público-privadas para reduzir as listas de espera.",
        "Implementação de medidas para aumentar a natalidade através de incentivos fiscais e apoio às famílias.",
        "Programa de descentralização administrativa e valorização do interior do país.",
        "Modernização da administração pública com ênfase na digitalização e redução da burocracia.",
    ],
    "ps": [
        "Reforço do Estado Social e do Serviço Nacional de Saúde como pilar fundamental da sociedade portuguesa.",
        "Continuação da política de aumentos graduais do salário mínimo nacional para combater desigualdades.",
        "Investimento em habitação pública e regulação do mercado imobiliário para garantir acesso à habitação.",
        "Aposta na transição energética e economia verde como motores de crescimento sustentável.",
        "Defesa do ensino público de qualidade, com reforço de recursos e valorização dos professores.",
    ],
    "be": [
        "Nacionalização de serviços essenciais e rejeição de privatizações em setores estratégicos.",
        "Aumento significativo do salário mínimo nacional e reforço dos direitos laborais.",
        "Criação de uma rede pública de creches gratuitas e investimento na educação pública.",
        "Implementação de políticas ambiciosas de combate às alterações climáticas e transição energética justa.",
        "Defesa de um plano nacional de habitação pública e controlo efetivo das rendas.",
    ],
    "cdu": [
        "Valorização dos serviços públicos e reversão de privatizações em setores estratégicos.",
        "Aumento significativo dos salários e pensões para melhorar as condições de vida dos trabalhadores.",
        "Defesa da produção nacional e reindustrialização do país como forma de garantir a soberania económica.",
        "Implementação de políticas de apoio à agricultura familiar e às pequenas e médias empresas.",
        "Investimento público em habitação e controlo das rendas para garantir o direito à habitação.",
    ],
    "il": [
        "Simplificação e redução significativa da carga fiscal para impulsionar o crescimento económico.",
        "Liberalização do mercado de trabalho para estimular a criação de emprego e a competitividade.",
        "Reforma do sistema de saúde, promovendo a liberdade de escolha e a concorrência entre prestadores.",
        "Diminuição da intervenção do Estado na economia, privilegiando a iniciativa privada e o empreendedorismo.",
        "Modernização e redução da burocracia estatal, apostando na digitalização e simplificação de processos.",
    ],
    "chega": [
        "Combate à corrupção com penalizações mais severas e maior transparência na administração pública.",
        "Reforço das políticas de segurança e autoridade do Estado, com mais recursos para as forças policiais.",
        "Reforma profunda do sistema judicial para garantir maior celeridade e eficácia na aplicação da justiça.",
        "Controlo mais rigoroso da imigração ilegal e políticas de integração mais exigentes.",
        "Redução da carga fiscal para famílias e empresas como estímulo à economia.",
    ],
}

# Checked in order; PSD must win over PS.
_PARTY_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("psd", re.compile(r"\b(psd|social[\s-]democrata)\b", re.IGNORECASE)),
    ("ps", re.compile(r"\b(ps|socialista)\b", re.IGNORECASE)),
    ("be", re.compile(r"\b(be|bloco)\b", re.IGNORECASE)),
    ("cdu", re.compile(r"\b(cdu|comunista|pcp)\b", re.IGNORECASE)),
    ("il", re.compile(r"\b(il|iniciativa\s+liberal)\b", re.IGNORECASE)),
    ("chega", re.compile(r"\bchega\b", re.IGNORECASE)),
]


def detect_party(message: str) -> str:
    for key, pattern in _PARTY_PATTERNS:
        if pattern.search(message):
            return key
    return "geral"


def fallback_answer(message: str) -> str:
    proposals = FALLBACK_PROPOSALS[detect_party(message)]
    return "• " + "\n\n• ".join(proposals)
