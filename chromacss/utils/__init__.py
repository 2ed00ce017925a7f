from .num_utils import round_half_up, round_to_int, np_round_half_up, normalize_hue, format_number

__all__ = ['round_half_up', 'round_to_int', 'np_round_half_up', 'normalize_hue', 'format_number']
