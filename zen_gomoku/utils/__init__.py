from .visualization import (
    BoardFormatter,
    ColorBoardFormatter,
    SimpleBoardFormatter,
    create_formatter,
    format_board_for_prompt,
    format_status,
)

__all__ = [
    'BoardFormatter',
    'ColorBoardFormatter',
    'SimpleBoardFormatter',
    'create_formatter',
    'format_board_for_prompt',
    'format_status',
]
