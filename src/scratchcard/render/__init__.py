from scratchcard.render.overlay import draw_grid_overlay as draw_grid_overlay
from scratchcard.render.stamper import PygameMaskStamper as PygameMaskStamper
from scratchcard.render.stamper import mask_texture_size as mask_texture_size
