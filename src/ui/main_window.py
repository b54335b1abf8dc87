import logging
from pathlib import Path
from typing import override

import gi

from application.controller import MetronomeController
from config import (
    APPLICATION_ID,
    APPLICATION_NAME,
    AUTHORS,
    BPM_DEFAULT,
    BPM_MAX,
    BPM_MIN,
    BPM_PAGE_INCREMENT,
    BPM_STEP_INCREMENT,
    COPYRIGHT,
    PLAY_ICON,
    STOP_ICON,
)
from domain.models import TransportState, WindowCommand
from infrastructure.scheduler import glib_schedule
from infrastructure.sound_cue import FluidSynthCuePlayer

gi.require_version(namespace='Gtk', version='4.0')
gi.require_version(namespace='Adw', version='1')

from gi.repository import (  # noqa: E402
    Adw,  # pyright: ignore[reportMissingModuleSource]
    Gdk,  # pyright: ignore[reportMissingModuleSource]
    Gio,  # pyright: ignore[reportMissingModuleSource]
    GLib,  # pyright: ignore[reportMissingModuleSource]
    Gtk,  # pyright: ignore[reportMissingModuleSource]
)

logger = logging.getLogger(__name__)

UI_DIR = Path(__file__).parent / 'blueprints'
CSS_PATH = Path(__file__).parent / 'style' / 'beat.css'


@Gtk.Template(filename=str(UI_DIR / 'beat_window.ui'))
class BeatWindow(Adw.ApplicationWindow):
    __gtype_name__ = 'BeatWindow'

    header_bar = Gtk.Template.Child()
    menu_button = Gtk.Template.Child()
    bpm_entry = Gtk.Template.Child()
    bpm_scale = Gtk.Template.Child()
    play_button = Gtk.Template.Child()

    def __init__(
        self, app: Adw.Application, controller: MetronomeController | None = None
    ) -> None:
        super().__init__(application=app)

        self.controller: MetronomeController = controller or MetronomeController(
            schedule=glib_schedule,
            emitter=FluidSynthCuePlayer(),
        )

        for command in WindowCommand:
            self._add_action(command=command)

        self._setup_bpm_controls()
        self.play_button.set_icon_name(icon_name=PLAY_ICON)
        self._load_css()
        self._setup_menu()

        _ = self.bpm_scale.connect('value-changed', self._on_bpm_changed)

    def _add_action(self, command: WindowCommand) -> None:
        if command.is_stateful:
            action: Gio.SimpleAction = Gio.SimpleAction.new_stateful(
                name=command.value,
                parameter_type=None,
                state=GLib.Variant.new_boolean(False),
            )
        else:
            action = Gio.SimpleAction.new(name=command.value, parameter_type=None)
        _ = action.connect('activate', self._on_command, command)
        self.add_action(action=action)

    def _setup_bpm_controls(self) -> None:
        adjustment: Gtk.Adjustment = Gtk.Adjustment.new(
            value=BPM_DEFAULT,
            lower=BPM_MIN,
            upper=BPM_MAX,
            step_increment=BPM_STEP_INCREMENT,
            page_increment=BPM_PAGE_INCREMENT,
            page_size=0,
        )
        self.bpm_scale.set_adjustment(adjustment=adjustment)
        self.bpm_entry.set_adjustment(adjustment=adjustment)
        self.bpm_entry.set_increments(step=BPM_STEP_INCREMENT, page=BPM_PAGE_INCREMENT)

    def _load_css(self) -> None:
        if not CSS_PATH.is_file():
            logger.warning('Folha de estilo não encontrada: %s', CSS_PATH)
            return

        provider: Gtk.CssProvider = Gtk.CssProvider()
        provider.load_from_path(str(CSS_PATH))
        Gtk.StyleContext.add_provider_for_display(
            display=Gdk.Display.get_default(),
            provider=provider,
            priority=Gtk.STYLE_PROVIDER_PRIORITY_USER,
        )

    def _setup_menu(self) -> None:
        builder: Gtk.Builder = Gtk.Builder.new_from_file(str(UI_DIR / 'beat_menu.ui'))
        menu: Gio.MenuModel = builder.get_object('menu')
        self.menu_button.set_menu_model(menu_model=menu)

    def _on_command(
        self, action: Gio.SimpleAction, _param: GLib.Variant | None, command: WindowCommand
    ) -> None:
        match command:
            case WindowCommand.PLAY:
                self._toggle_play(action)
            case WindowCommand.ABOUT:
                self._show_about()

    def _toggle_play(self, action: Gio.SimpleAction) -> None:
        playing: bool = self.controller.toggle() is TransportState.PLAYING
        action.set_state(GLib.Variant.new_boolean(playing))

        icon_name = STOP_ICON if playing else PLAY_ICON
        self.play_button.set_icon_name(icon_name=icon_name)

    def _on_bpm_changed(self, scale: Gtk.Scale) -> None:
        self.controller.set_bpm(scale.get_value())

    def _show_about(self) -> None:
        about: Adw.AboutWindow = Adw.AboutWindow(
            transient_for=self,
            application_name=APPLICATION_NAME,
            application_icon=APPLICATION_ID,
            copyright=COPYRIGHT,
            license_type=Gtk.License.GPL_3_0,
            developers=AUTHORS,
        )
        about.present()


class Application(Adw.Application):
    def __init__(self) -> None:
        super().__init__(application_id=APPLICATION_ID)
        self.window: BeatWindow | None = None

    @override
    def do_activate(self) -> None:
        if not self.window:
            self.window = BeatWindow(app=self)
        self.window.present()

    @override
    def do_shutdown(self) -> None:
        if self.window and self.window.controller:
            self.window.controller.shutdown()
        Adw.Application.do_shutdown(self)
