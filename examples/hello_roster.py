import roster


def main() -> None:
    server = roster.run(port=0)
    client = server.client()

    for name in ("Ada", "Grace", "Linus"):
        user_id = client.create_user(name)
        print(f"created {name!r} as {user_id}")

    print("user 2:", client.get_user(2))
    print("user 999:", client.get_user(999))

    server.stop()


if __name__ == "__main__":
    main()
