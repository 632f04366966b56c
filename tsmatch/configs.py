"""parameter presets for the environments, pass them with TrueSkill(**default_params)"""

default_params = {
    'mu': 25.0,
    'sigma': 25.0 / 3.0,
    'beta': 25.0 / 6.0,
    'tau': 25.0 / 300.0,
    'draw_probability': 0.1,
}

# for SimpleTrueSkill or games where draws can't happen
no_draw_params = {
    'mu': 25.0,
    'sigma': 25.0 / 3.0,
    'beta': 25.0 / 6.0,
    'tau': 25.0 / 300.0,
}
