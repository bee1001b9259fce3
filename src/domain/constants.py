"""Domain constants shared across layers."""

from src.domain.entities.candidate import Candidate, ElectionTier


MIN_VOTER_AGE = 18
MAX_VOTER_AGE = 99

DNI_LENGTH = 8
PHONE_LENGTH = 9

GENDER_OPTIONS: tuple[str, ...] = ("Masculino", "Femenino", "Otro")
EDUCATION_OPTIONS: tuple[str, ...] = ("Primaria", "Secundaria", "Universidad", "Posgrado")

# Placeholder the backend writes into cleaned null fields
MISSING_VALUE_MARKER = "N/A"

MODEL_TYPES: dict[str, str] = {
    "classification": "Clasificación",
    "regression": "Regresión",
}

AVAILABLE_ALGORITHMS: dict[str, dict[str, str]] = {
    "classification": {
        "random_forest": "Random Forest",
        "logistic_regression": "Regresión Logística",
        "gradient_boosting": "Gradient Boosting",
    },
    "regression": {
        "linear_regression": "Regresión Lineal",
        "ridge": "Ridge",
        "lasso": "Lasso",
        "random_forest": "Random Forest",
        "gradient_boosting": "Gradient Boosting",
    },
}

DEFAULT_ALGORITHMS: dict[str, str] = {
    "classification": "random_forest",
    "regression": "linear_regression",
}

MIN_TRAINING_VOTES = 10
SMALL_DATASET_THRESHOLD = 20
SMALL_DATASET_TEST_SIZE = 0.1
DEFAULT_TEST_SIZE = 0.2
DEFAULT_RANDOM_STATE = 42

DEFAULT_CLUSTER_COUNT = 3


CANDIDATE_CATALOG: tuple[Candidate, ...] = (
    # Presidencial
    Candidate(
        id=1,
        name="Keiko Fujimori",
        party="Fuerza Popular",
        tier=ElectionTier.PRESIDENTIAL,
        color="hsl(220 85% 45%)",
        bio="Oficializó su candidatura presidencial por Fuerza Popular.",
        education="Maestría en Administración Pública - Universidad de Harvard",
        experience=(
            "Líder de Fuerza Popular, excongresista, candidata presidencial "
            "en elecciones anteriores"
        ),
        proposals=(
            "Fortalecimiento de la seguridad ciudadana",
            "Programas sociales focalizados",
            "Promoción de la inversión privada",
            "Mejora del sistema de salud pública",
            "Fomento a la educación técnica",
        ),
        website="https://fuerzapopular.com",
        email="contacto@fuerzapopular.com",
    ),
    Candidate(
        id=2,
        name="Rafael López Aliaga",
        party="Renovación Popular",
        tier=ElectionTier.PRESIDENTIAL,
        color="hsl(200 95% 45%)",
        bio="Renunció a su cargo como alcalde de Lima para postular a la presidencia.",
        education="Maestría en Administración de Empresas",
        experience="Ex alcalde de Lima, empresario, líder de Renovación Popular",
        proposals=(
            "Combate frontal a la corrupción",
            "Modernización del Estado",
            "Promoción de valores familiares",
            "Incentivos a la inversión extranjera",
            "Fortalecimiento de la seguridad nacional",
        ),
        website="https://lopezaliaga.com",
        email="info@lopezaliaga.com",
    ),
    Candidate(
        id=3,
        name="César Acuña",
        party="Alianza Para el Progreso",
        tier=ElectionTier.PRESIDENTIAL,
        color="hsl(140 75% 45%)",
        bio="Exgobernador regional, fundó Alianza Para el Progreso.",
        education="Doctorado en Educación - Universidad Nacional de Trujillo",
        experience=(
            "Ex gobernador regional de La Libertad, fundador de universidades privadas"
        ),
        proposals=(
            "Masificación de la educación técnica",
            "Impulso a la infraestructura educativa",
            "Programas de emprendimiento juvenil",
            "Desarrollo de infraestructura regional",
            "Apoyo a la pequeña empresa",
        ),
        website="https://cesaracuna.com",
        email="contacto@cesaracuna.com",
    ),
    Candidate(
        id=4,
        name="George Forsyth",
        party="Somos Perú",
        tier=ElectionTier.PRESIDENTIAL,
        color="hsl(30 85% 55%)",
        bio="Exalcalde y exarquero; candidato por Somos Perú.",
        education="Estudios en Administración",
        experience="Ex alcalde de La Victoria, ex futbolista profesional",
        proposals=(
            "Fortalecimiento del deporte nacional",
            "Mejora de la gestión municipal",
            "Programas de seguridad ciudadana",
            "Desarrollo de infraestructura deportiva",
            "Apoyo al talento juvenil",
        ),
        website="https://georgeforsyth.com",
        email="info@georgeforsyth.com",
    ),
    Candidate(
        id=5,
        name="Yonhy Lescano",
        party="Acción Popular",
        tier=ElectionTier.PRESIDENTIAL,
        color="hsl(0 75% 55%)",
        bio="Excongresista, se postula como candidato.",
        education="Abogado - Universidad Nacional Mayor de San Marcos",
        experience="Ex congresista de la República, miembro de Acción Popular",
        proposals=(
            "Defensa de la constitución",
            "Fortalecimiento del sistema judicial",
            "Programas de apoyo a la tercera edad",
            "Protección de los derechos humanos",
            "Transparencia en la gestión pública",
        ),
        website="https://yonhylescano.com",
        email="contacto@yonhylescano.com",
    ),
    Candidate(
        id=6,
        name="Mariano González",
        party="Salvemos al Perú",
        tier=ElectionTier.PRESIDENTIAL,
        color="hsl(280 75% 55%)",
        bio=(
            "Presidente de Salvemos al Perú; ha adelantado propuestas y se "
            "proyecta como aspirante."
        ),
        education="Economista - Universidad del Pacífico",
        experience="Ex ministro de Economía, analista político",
        proposals=(
            "Reforma económica integral",
            "Transparencia en la gestión pública",
            "Fomento a las exportaciones",
            "Reducción de la burocracia estatal",
            "Incentivos a la innovación tecnológica",
        ),
        website="https://marianogonzalez.com",
        email="info@marianogonzalez.com",
    ),
    Candidate(
        id=7,
        name="Roberto Chiabra",
        party="PPC y Unidad y Paz",
        tier=ElectionTier.PRESIDENTIAL,
        color="hsl(160 75% 45%)",
        bio=(
            "Congresista y ex comandante general del Ejército; candidato por la "
            "coalición entre Partido Popular Cristiano (PPC) y Unidad y Paz."
        ),
        education="Estudios Militares - Escuela Militar de Chorrillos",
        experience="Ex comandante general del Ejército, congresista de la República",
        proposals=(
            "Fortalecimiento de las FF.AA.",
            "Seguridad nacional integral",
            "Lucha contra el terrorismo",
            "Modernización de las fuerzas armadas",
            "Defensa de la soberanía nacional",
        ),
        website="https://robertochiabra.com",
        email="contacto@robertochiabra.com",
    ),
    # Regional
    Candidate(
        id=8,
        name="Rosa Vásquez Cuadrado",
        party="Unidad Cívica Lima",
        tier=ElectionTier.REGIONAL,
        color="hsl(220 85% 45%)",
        bio="Gobernadora regional actual de Lima, buscando la reelección.",
        education="Maestría en Gestión Pública - Universidad Nacional Mayor de San Marcos",
        experience="Gobernadora Regional de Lima (2023-actualidad), ex alcaldesa distrital",
        proposals=(
            "Fortalecimiento de la infraestructura vial regional",
            "Programas de desarrollo agrícola en provincias",
            "Modernización de los servicios de salud regionales",
            "Impulso al turismo interno en la región",
            "Mejora de la conectividad digital rural",
        ),
        email="rosa.vasquez@regionlima.gob.pe",
    ),
    Candidate(
        id=9,
        name="Rohel Sánchez Sánchez",
        party="Yo Arequipa",
        tier=ElectionTier.REGIONAL,
        color="hsl(200 95% 45%)",
        bio="Gobernador regional actual de Arequipa, candidato a la reelección.",
        education="Ingeniero Civil - Universidad Nacional de San Agustín",
        experience=(
            "Gobernador Regional de Arequipa (2023-actualidad), ex gerente municipal"
        ),
        proposals=(
            "Continuidad de proyectos de infraestructura vial",
            "Fomento a la industria y exportación regional",
            "Fortalecimiento del sector agroindustrial",
            "Modernización del sistema de salud arequipeño",
            "Promoción del turismo en el Valle del Colca",
        ),
        email="rohel.sanchez@regionarequipa.gob.pe",
    ),
    Candidate(
        id=10,
        name="Joana Cabrera Pimentel",
        party="Alianza para el Progreso",
        tier=ElectionTier.REGIONAL,
        color="hsl(140 75% 45%)",
        bio="Gobernadora regional actual de La Libertad, busca la reelección.",
        education="Economista - Universidad Nacional de Trujillo",
        experience="Gobernadora Regional de La Libertad (2023-actualidad), ex viceministra",
        proposals=(
            "Expansión de proyectos de irrigación",
            "Fomento a la agroexportación regional",
            "Mejora de la seguridad ciudadana",
            "Desarrollo de infraestructura educativa",
            "Impulso al turismo arqueológico",
        ),
        email="joana.cabrera@regionlalibertad.gob.pe",
    ),
    Candidate(
        id=11,
        name="Werner Salcedo Álvarez",
        party="Somos Perú",
        tier=ElectionTier.REGIONAL,
        color="hsl(30 85% 55%)",
        bio="Gobernador regional actual del Cusco, candidato a la reelección.",
        education="Antropólogo - Universidad Nacional San Antonio Abad del Cusco",
        experience="Gobernador Regional del Cusco (2023-actualidad), ex director de cultura",
        proposals=(
            "Protección y promoción del patrimonio cultural",
            "Desarrollo del turismo sostenible",
            "Mejora de la conectividad vial interprovincial",
            "Fortalecimiento de la agricultura andina",
            "Programas de desarrollo social en comunidades",
        ),
        email="werner.salcedo@regioncusco.gob.pe",
    ),
    Candidate(
        id=12,
        name="Zósimo Cárdenas Muje",
        party="Sierra y Selva Contigo Junín",
        tier=ElectionTier.REGIONAL,
        color="hsl(0 75% 55%)",
        bio="Gobernador regional actual de Junín, busca la reelección.",
        education="Ingeniero Agrónomo - Universidad Nacional del Centro del Perú",
        experience="Gobernador Regional de Junín (2023-actualidad), ex director agrario",
        proposals=(
            "Desarrollo de la agricultura de la sierra y selva",
            "Mejora de la infraestructura productiva",
            "Fomento al turismo ecológico",
            "Fortalecimiento de la educación técnica",
            "Programas de desarrollo ganadero",
        ),
        email="zosimo.cardenas@regionjunin.gob.pe",
    ),
    Candidate(
        id=13,
        name="Luis Hidalgo Okimura",
        party="Movimiento Regional Loreto",
        tier=ElectionTier.REGIONAL,
        color="hsl(280 75% 55%)",
        bio=(
            "Candidato a gobernador regional de Loreto con experiencia en "
            "gestión pública."
        ),
        education="Abogado - Universidad Nacional de la Amazonía Peruana",
        experience=(
            "Ex alcalde provincial de Maynas, especialista en desarrollo amazónico"
        ),
        proposals=(
            "Protección de la biodiversidad amazónica",
            "Desarrollo de la conectividad fluvial",
            "Fomento al turismo ecológico",
            "Mejora de los servicios de salud",
            "Impulso a la investigación científica",
        ),
        email="luis.hidalgo@loreto.gob.pe",
    ),
    Candidate(
        id=14,
        name="Ana María Tello",
        party="Fuerza Lambayeque",
        tier=ElectionTier.REGIONAL,
        color="hsl(160 75% 45%)",
        bio="Candidata a gobernadora regional de Lambayeque, ex congresista.",
        education="Médica Cirujana - Universidad Nacional Pedro Ruiz Gallo",
        experience="Ex congresista de la República, ex directora regional de salud",
        proposals=(
            "Fortalecimiento del sistema de salud regional",
            "Desarrollo del turismo arqueológico",
            "Apoyo a la pequeña y mediana empresa",
            "Mejora de la infraestructura educativa",
            "Programas de seguridad alimentaria",
        ),
        email="ana.tello@regionlambayeque.gob.pe",
    ),
    Candidate(
        id=15,
        name="Ricardo Chavarría",
        party="Unidad Regional Piura",
        tier=ElectionTier.REGIONAL,
        color="hsl(320 75% 55%)",
        bio="Candidato a gobernador regional de Piura, ex alcalde provincial.",
        education="Ingeniero Industrial - Universidad Nacional de Piura",
        experience="Ex alcalde provincial de Piura, empresario agroindustrial",
        proposals=(
            "Desarrollo de infraestructura contra fenómenos naturales",
            "Fomento a la agroexportación",
            "Mejora de la conectividad vial",
            "Programas de reactivación económica",
            "Fortalecimiento de la educación técnica",
        ),
        email="ricardo.chavarria@regionpiura.gob.pe",
    ),
    # Distrital
    Candidate(
        id=16,
        name="Miguel Castro",
        party="Acción Popular",
        tier=ElectionTier.DISTRICT,
        color="hsl(220 85% 45%)",
        bio="Candidato a la alcaldía del distrito de Miraflores, Lima.",
        education="Arquitecto - Universidad Nacional de Ingeniería",
        experience="Ex regidor distrital, especialista en desarrollo urbano",
        proposals=(
            "Mejora de espacios públicos y áreas verdes",
            "Programas de seguridad ciudadana",
            "Fomento al comercio local",
            "Modernización del transporte distrital",
            "Promoción cultural y turística",
        ),
        email="miguel.castro@miraflores.gob.pe",
    ),
    Candidate(
        id=17,
        name="Carmen Mendoza",
        party="Somos Perú",
        tier=ElectionTier.DISTRICT,
        color="hsl(200 95% 45%)",
        bio="Candidata a la alcaldía del distrito de Arequipa, Arequipa.",
        education="Educadora - Universidad Nacional de San Agustín",
        experience="Ex directora regional de educación, líder comunal",
        proposals=(
            "Mejora de la infraestructura educativa",
            "Programas de apoyo a la tercera edad",
            "Fomento al deporte distrital",
            "Recuperación de áreas históricas",
            "Promoción del turismo local",
        ),
        email="carmen.mendoza@muniarequipa.gob.pe",
    ),
    Candidate(
        id=18,
        name="Carlos Rojas",
        party="Alianza para el Progreso",
        tier=ElectionTier.DISTRICT,
        color="hsl(140 75% 45%)",
        bio="Candidato a la alcaldía del distrito de Trujillo, La Libertad.",
        education="Ingeniero Civil - Universidad Nacional de Trujillo",
        experience="Ex gerente municipal, especialista en obras públicas",
        proposals=(
            "Modernización del sistema de recojo de basura",
            "Mejora de la iluminación pública",
            "Programas de empleo juvenil",
            "Recuperación de espacios históricos",
            "Fomento a la cultura y arte local",
        ),
        email="carlos.rojas@munitrujillo.gob.pe",
    ),
    Candidate(
        id=19,
        name="Lucía Quispe",
        party="Fuerza Cusco",
        tier=ElectionTier.DISTRICT,
        color="hsl(30 85% 55%)",
        bio="Candidata a la alcaldía del distrito de Wanchaq, Cusco.",
        education="Antropóloga - Universidad Nacional San Antonio Abad del Cusco",
        experience="Ex regidora distrital, defensora del patrimonio cultural",
        proposals=(
            "Protección del patrimonio cultural distrital",
            "Programas de desarrollo social",
            "Mejora de mercados municipales",
            "Fomento al turismo local",
            "Desarrollo de infraestructura deportiva",
        ),
        email="lucia.quispe@muniwanchaq.gob.pe",
    ),
    Candidate(
        id=20,
        name="Jorge Silva",
        party="Junín Unido",
        tier=ElectionTier.DISTRICT,
        color="hsl(0 75% 55%)",
        bio="Candidato a la alcaldía del distrito de Huancayo, Junín.",
        education="Economista - Universidad Nacional del Centro del Perú",
        experience="Ex gerente municipal, especialista en desarrollo económico",
        proposals=(
            "Reactivación económica post pandemia",
            "Mejora de la seguridad ciudadana",
            "Programas de apoyo a comerciantes",
            "Modernización del transporte público",
            "Fomento a la cultura y tradiciones",
        ),
        email="jorge.silva@munihuancayo.gob.pe",
    ),
)


def candidates_by_tier(tier: ElectionTier) -> list[Candidate]:
    """Catalog entries of one tier, in catalog order."""
    return [c for c in CANDIDATE_CATALOG if c.tier == tier]


def find_candidate(candidate_id: int | None) -> Candidate | None:
    """Look up a catalog entry by id."""
    if candidate_id is None:
        return None
    for candidate in CANDIDATE_CATALOG:
        if candidate.id == candidate_id:
            return candidate
    return None
