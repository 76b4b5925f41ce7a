theme_name = "gruvbox"

theme_data = {
    # Gruvbox-like dark background
    "bg": (40, 40, 40),        # ~ #282828
    # Foreground (text color)
    "fg": (235, 219, 178),     # ~ #EBDBB2
    # sel = current line number and status bar background
    "sel": (60, 56, 54),       # ~ #3C3836
    # accent = line numbers and the mode segment
    "accent": (215, 153, 33),  # ~ #D79921
    # highlight = status bar text
    "highlight": (251, 73, 52) # ~ #FB4934
}
