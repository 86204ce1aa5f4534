from models import ContractViolation, SimulationInput
from utils.currency import clean_currency, clean_percent
from utils.xml_loader import DEFAULT_GOAL
from dataclasses import fields
from typing import Any

CURRENCY_FIELDS = ("target_amount", "current_wealth", "monthly_contribution")


def get_simulation_input(**kwargs: Any) -> SimulationInput:
    """
    Builds a validated SimulationInput by merging XML defaults and all UI inputs,
    using reflection (dataclasses.fields) to ensure only valid fields are passed.
    """

    # 1. Start with defaults loaded from the XML goal file
    inputs_dict = DEFAULT_GOAL.copy()

    # 2. Merge ALL UI inputs over the defaults; None means "not supplied"
    inputs_dict.update({k: v for k, v in kwargs.items() if v is not None})

    # 3. Handle the UI naming conventions
    if 'monthly_sip' in inputs_dict:
        inputs_dict['monthly_contribution'] = inputs_dict.pop('monthly_sip')

    # 4. Clean formatted text coming from the inputs
    for key in CURRENCY_FIELDS:
        inputs_dict[key] = clean_currency(inputs_dict.get(key))

    inflation_rate = clean_percent(inputs_dict.get('inflation_rate'))
    if inflation_rate is None:
        raise ContractViolation(f"Unreadable inflation rate: {inputs_dict.get('inflation_rate')!r}")
    inputs_dict['inflation_rate'] = inflation_rate

    target_year = inputs_dict.get('target_year')
    if isinstance(target_year, float) and target_year.is_integer():
        inputs_dict['target_year'] = int(target_year)

    # 5. DYNAMIC FIELD MAPPING AND FILTERING (Reflection)
    input_field_names = {f.name for f in fields(SimulationInput)}

    final_inputs = {
        key: value
        for key, value in inputs_dict.items()
        if key in input_field_names
    }

    missing = input_field_names - final_inputs.keys()
    if missing:
        raise ContractViolation(f"Missing simulation inputs: {sorted(missing)}")

    # 6. Create and validate the SimulationInput object
    return SimulationInput(**final_inputs).validate()
