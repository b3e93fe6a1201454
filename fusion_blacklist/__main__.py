from fusion_blacklist.command_line import fusion_blacklist_cli

if __name__ == "__main__":
    fusion_blacklist_cli()
