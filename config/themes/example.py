theme_name = "nord"
# This is an example theme based on the nord color pallete.
# Copy it to ~/prawn/config/themes/ and tweak the colors to your liking,
# then switch to it with :theme nord
theme_data = {
    # background
    "bg": (46, 52, 64),      # #2E3440
    # foreground (text color)
    "fg": (216, 222, 233),   # #D8DEE9
    # current line number / status bar background
    "sel": (67, 76, 94),     # #434C5E
    # line numbers / mode segment
    "accent": (136, 192, 208),  # #88C0D0
    # status bar text
    "highlight": (229, 233, 240),  # #E5E9F0
}
