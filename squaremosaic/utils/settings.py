# Defaults for values that mosaic files and the layout controller may omit.
DEFAULT_SETTINGS = {
    'direction': 'vertical',
    'separator_between_sections': 0.0,
    # Headers/footers disappear with their section's last item unless told otherwise.
    'supplementary_hidden_when_empty': True,
    'section_background': False,
    'block_separators': {'before': 0.0, 'between': 0.0, 'after': 0.0},
    'row_block_spacing': 0.0,
}


def get_default(key: str):
    value = DEFAULT_SETTINGS[key]
    if isinstance(value, dict):
        return dict(value)
    return value
