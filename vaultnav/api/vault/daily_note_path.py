from .VaultConfig import VaultConfig


def daily_note_path(vault_config: VaultConfig, date: str) -> str:
    """Path of the daily note for ``date``: root + daily_dir + "/" + date + ".md"."""
    folder = vault_config.daily_dir.strip("/")
    prefix = f"{vault_config.root}{folder}/" if folder else vault_config.root
    return f"{prefix}{date}.md"
