"""Department → province → district selectors."""

import streamlit as st

from src.domain.services.location_cascade import LocationSelection
from src.interfaces.web.streamlit.presenters.vote_presenter import VotePresenter


def _index_of(options: list[str], value: str) -> int | None:
    return options.index(value) if value in options else None


def render_location_selector(
    presenter: VotePresenter, key_prefix: str = "vote"
) -> LocationSelection:
    """Render the cascade and return the resulting selection.

    Lower-level widget keys include the parent value, so a new department
    or province always starts with an empty child selector.
    """
    location = presenter.get_location()
    col1, col2, col3 = st.columns(3)

    with col1:
        departments = presenter.department_options()
        department = st.selectbox(
            "Departamento *",
            departments,
            index=_index_of(departments, location.department),
            placeholder="Seleccione su departamento",
            key=f"{key_prefix}_department",
        )
        if department and department != location.department:
            presenter.select_department(department)
            location = presenter.get_location()

    with col2:
        provinces = presenter.province_options()
        province = st.selectbox(
            "Provincia *",
            provinces,
            index=_index_of(provinces, location.province),
            placeholder=(
                "Seleccione su provincia"
                if location.department
                else "Primero seleccione un departamento"
            ),
            disabled=not provinces,
            key=f"{key_prefix}_province_{location.department}",
        )
        if province and province != location.province:
            presenter.select_province(province)
            location = presenter.get_location()

    with col3:
        districts = presenter.district_options()
        district = st.selectbox(
            "Distrito *",
            districts,
            index=_index_of(districts, location.district),
            placeholder=(
                "Seleccione su distrito"
                if location.province
                else "Primero seleccione una provincia"
            ),
            disabled=not districts,
            key=f"{key_prefix}_district_{location.department}_{location.province}",
        )
        if district and district != location.district:
            presenter.select_district(district)
            location = presenter.get_location()

    return location
