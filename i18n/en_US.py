"""English translation table."""

STRINGS: dict[str, str] = {
    # ── Exceptions ──
    "exc.invalid_card": "{name}: {field} must be positive, got {value}",
    "exc.invalid_composition": "A composite card needs at least one component, all of the same basic kind",
    "exc.game_state": "This operation is not allowed in the current game state",
    "exc.game_not_started": "The game has not started yet, call start_game() first",
    "exc.game_finished": "The game is already over",
    "exc.invalid_replay": "This operation may only be performed once",
    "exc.game_already_started": "The game has already started",
    "exc.config_error": "Invalid game configuration",
    "exc.data_load_error": "Failed to load card data",

    # ── Results ──
    "game.over_win": "The disease is cured, the Doctor wins!",
    "game.over_lose": "The Doctor's vitality is exhausted, the Disease wins!",
    "game.over_draw": "Turn limit reached, the game is a draw!",
    "game.in_progress": "Game in progress",
    "title.doctor_win": "Healer of the World",
    "title.disease_win": "Greater Pathogen",
    "result.win": "Victory",
    "result.lose": "Defeat",
    "result.draw": "Draw",
    "result.pending": "In progress",

    # ── Roles / schools ──
    "role.doctor": "Doctor",
    "role.disease": "Disease",
    "school.classical_formula": "Classical Formula",
    "school.warm_disease": "Warm Disease",
    "school.golden_needle": "Golden Needle",
    "school.earth_tonifying": "Earth Tonifying",

    # ── Battle log ──
    "log.game_start": "======= The battle begins! =======",
    "log.player_intro": "{role}: {name} ({school})",
    "log.turn_start": "—— Turn {turn} ——",
    "log.single_herb": "{name} treats with [{card}], restoring {heal} and dealing {damage} damage",
    "log.formula": "{name} combines {herbs} into [{formula}] for {effect}",
    "log.acupoint": "{name} needles [{card}] for {damage} damage",
    "log.symptom": "{name} unleashes [{card}] for {damage} damage",
    "log.skip.empty_hand": "{name} has no cards and cannot act",
    "log.skip.not_herb": "{name} drew [{card}], which is not a herb",
    "log.skip.not_enough_herbs": "{name} holds only {count} herb(s), no formula possible",
    "log.skip.no_acupoint": "{name} holds no acupoint card",
    "log.skip.not_symptom": "{name} drew [{card}], nothing happens",
    "log.doctor_title": "{name} earns the title [{title}]",
    "log.disease_title": "{name} is promoted to [{title}]!",

    # ── Six-channel diagnosis ──
    "diag.new_game": "A new patient arrives, diagnose and treat",
    "diag.diagnose": "Diagnosis: {symptom} → {channel} pattern",
    "diag.correct": "{formula} matches the {channel} pattern, effect {potency}",
    "diag.wrong": "{formula} does not suit the {channel} pattern, condition worsens",
    "diag.transmit": "The pathogen moves: {old} → {new}",
    "diag.cured": "Cured!",
    "diag.failed": "Treatment failed...",

    # ── UI ──
    "ui.title": "Yizhan",
    "ui.wait_continue": "Press Enter to continue...",
    "ui.invalid_choice": "Invalid choice",
    "ui.cancel_hint": "0 to go back",
    "ui.menu.battle": "Start battle (Doctor vs Disease)",
    "ui.menu.diagnosis": "Six-channel diagnosis",
    "ui.menu.rules": "Rules",
    "ui.menu.quit": "Quit",
    "ui.menu.prompt": "Please select [1-{count}]: ",
    "ui.menu.prompt_cancel": "Please select [0-{count}]: ",
    "ui.school.title": "Choose the Doctor's school",
    "ui.school.hint.classical_formula": "Herb and formula effects x2",
    "ui.school.hint.golden_needle": "Herb and formula effects x3",
    "ui.school.hint.earth_tonifying": "Herb and formula effects x2",
    "ui.turn_header": "Turn {turn}/{max_turns}",
    "ui.deck_count": "Deck: {count}",
    "ui.hand.title": "{name} · {count} card(s)",
    "ui.hand.name": "Name",
    "ui.hand.type": "Kind",
    "ui.hand.detail": "Details",
    "ui.card.herb": "{property} · {channel} · power {power}",
    "ui.card.acupoint": "{meridian} · power {power}",
    "ui.card.symptom": "{type} · damage {damage}",
    "ui.case.title": "Medical case",
    "ui.case.none": "No patient yet",
    "ui.case.tongue": "Tongue: {tongue}",
    "ui.case.pulse": "Pulse: {pulse}",
    "ui.case.symptoms": "Symptoms: {symptoms}",
    "ui.log_title": "Battle log",
    "ui.honor_title": "Title earned: [{title}]",
    "ui.summary.title": "Summary",
    "ui.summary.turns": "Turns",
    "ui.summary.result": "Result",
    "ui.summary.doctor_health": "Doctor vitality",
    "ui.summary.disease_health": "Disease strength",
    "ui.summary.doctor_hand": "Doctor cards left",
    "ui.summary.disease_hand": "Disease cards left",
    "ui.diag.channel": "Location: {channel}",
    "ui.diag.turn": "Turn {turn}",
    "ui.diag.choose_symptom": "Choose the patient's symptom",
    "ui.diag.choose_formula": "Choose a formula",

    # ── main.py ──
    "main.description": "Yizhan: a Doctor vs Disease card battle",
    "main.arg.seed": "random seed for a reproducible game",
    "main.arg.auto": "start one automatic battle without menus",
    "main.arg.delay": "seconds between turns in automatic mode",
    "main.arg.school": "the Doctor's school",
    "main.arg.lang": "interface language",
    "main.arg.log_level": "log level",
    "main.arg.debug": "debug mode (DEBUG logs, also printed to the console)",
    "main.doctor_name": "Zhang Zhongjing",
    "main.disease_name": "Warm Pathogen",
    "main.farewell": "\nThanks for playing Yizhan! Bye!",
    "main.interrupted": "\n\nGame interrupted, bye!",
    "main.error": "\nAn error occurred: {error}",
}
