import os
from pathlib import Path

APPLICATION_ID = 'net.bloerg.Beat'
APPLICATION_NAME = 'Beat'

# Faixa do controle de andamento
BPM_MIN = 1
BPM_MAX = 240
BPM_DEFAULT = 120
BPM_STEP_INCREMENT = 1
BPM_PAGE_INCREMENT = 5

# Evento tocado a cada batida
CLICK_EVENT = 'message'

# Nomes simbólicos de eventos sonoros para teclas de percussão General MIDI
SOUND_EVENTS = {
    'message': 76,  # Hi Wood Block
    'complete': 77,  # Low Wood Block
    'bell': 81,  # Open Triangle
    'dialog-warning': 56,  # Cowbell
}

# Caminho padrão para o SoundFont
DEFAULT_SOUNDFONT = Path(
    os.environ.get('BEAT_SOUNDFONT', '/usr/share/sounds/sf2/FluidR3_GM.sf2')
)

PERCUSSION_CHANNEL = 9
PERCUSSION_BANK = 128
CLICK_VELOCITY = 110
CLICK_DURATION = 0.05  # segundos até o note-off

PLAY_ICON = 'media-playback-start-symbolic'
STOP_ICON = 'media-playback-stop-symbolic'

AUTHORS = [
    'Matthias Vogelgesang <matthias.vogelgesang@gmail.com>',
]
COPYRIGHT = 'Copyright \N{COPYRIGHT SIGN} The Beat authors'
